"""Fixed interview catalogue: questions, rubric levels, roles and profiles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

CategoryType = Literal["principal", "debate", "support"]
ProfileKey = Literal["portavoz", "debatedor", "tecnico", "redator", "organizacao", "geral"]
RoleLabel = Literal["portavoz", "debatedor", "tecnico", "redator", "organizacao", "suplente"]


@dataclass(frozen=True, slots=True)
class Question:
    """One rubric question of the structured interview."""

    id: int
    category: CategoryType
    time_seconds: int
    text: str


QUESTIONS: tuple[Question, ...] = (
    Question(1, "principal", 45, "Conta uma situação em que um aluno gastou dinheiro e depois arrependeu-se. O que faltou na decisão?"),
    Question(2, "principal", 45, "Explica a um colega em 20 segundos: 'pagar a prestações' é bom ou mau? Depende de quê?"),
    Question(3, "principal", 45, "Diz 1 mensagem curta que convença alunos a aparecer (sem parecer 'palestra')."),
    Question(4, "debate", 30, "Ataque: 'Literacia financeira é seca e inútil.' Resposta: 1 exemplo + 1 consequência."),
    Question(5, "debate", 30, "Ataque: 'Isso não muda nada, a malta continua a gastar.' Resposta: 1 mudança concreta de comportamento."),
    Question(6, "debate", 30, "Ataque: 'Basta dizer poupa.' Resposta: por que isso falha + o que falta (crédito/custo total/scams)."),
    Question(7, "debate", 30, "Ataque: 'Se falas de scams/crypto, estás a assustar.' Resposta: diferença entre informar e assustar."),
    Question(8, "support", 60, "Cria uma atividade de 10 minutos (estilo desafio) que ensine 1 ideia útil de literacia financeira e que faça colegas quererem participar/votar em nós."),
    Question(9, "support", 60, "Como medes se resultou? Diz 2 indicadores simples (ex.: antes/depois num quiz curto)."),
    Question(10, "support", 120, "Escreve: como vais ajudar a lista a receber votos?"),
)

QUESTION_IDS: tuple[int, ...] = tuple(question.id for question in QUESTIONS)

CATEGORY_QUESTIONS: dict[CategoryType, tuple[int, ...]] = {
    category: tuple(q.id for q in QUESTIONS if q.category == category)
    for category in ("principal", "debate", "support")
}

RUBRIC: dict[int, str] = {
    0: "Não responde / Erra / Sem estrutura",
    1: "Fraco (vago, confuso)",
    2: "Aceitável (ideia certa, pouco clara)",
    3: "Bom (claro, correto, com exemplo)",
    4: "Excelente (curto, convincente, aplicável)",
}

SCORE_RANGE = range(0, 5)

CANDIDATE_COUNT = 10

ROLE_PRIORITY: tuple[ProfileKey, ...] = (
    "portavoz",
    "debatedor",
    "tecnico",
    "redator",
    "organizacao",
)
OVERALL_KEY: ProfileKey = "geral"
PROFILE_KEYS: tuple[ProfileKey, ...] = ROLE_PRIORITY + (OVERALL_KEY,)
ALTERNATE_ROLE: RoleLabel = "suplente"

ROLE_LABELS: dict[str, str] = {
    "portavoz": "Porta-voz",
    "debatedor": "Debatedor",
    "tecnico": "Técnico",
    "redator": "Redator",
    "organizacao": "Organização",
    "geral": "Score Geral",
    "suplente": "Suplente",
}

STRATEGY_LABELS: dict[str, str] = {
    "PRIORITIZE_PROFILES": "Opção A: Priorizar Perfis",
}


def get_question(question_id: int) -> Question:
    for question in QUESTIONS:
        if question.id == question_id:
            return question
    raise KeyError(f"Unknown question id: {question_id!r}")
