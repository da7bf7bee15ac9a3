"""Typer CLI entrypoint for the interview selection tool."""

from __future__ import annotations

from pathlib import Path
from typing import Any, NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .container import create_container
from .core import IncompleteDatasetError
from .logging import configure_logging
from .pipeline import AuditLogger, FinalOrderInvalidError, SelectionPipeline
from .rubric import QUESTIONS, ROLE_LABELS, RUBRIC, STRATEGY_LABELS, get_question
from .schemas.config import load_config

app = typer.Typer(help="Structured-interview scoring and final list CLI.")


def _pipeline(ctx: typer.Context) -> SelectionPipeline:
    return ctx.obj["pipeline"]


def _fail(message: str) -> NoReturn:
    typer.echo(message, err=True)
    raise typer.Exit(code=1)


@app.callback()
def main_options(
    ctx: typer.Context,
    state: Optional[Path] = typer.Option(None, dir_okay=False, help="State JSON path."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("WARNING", help="Log level for structured logging."),
    audit_log: Optional[Path] = typer.Option(None, dir_okay=False, help="Audit log output (JSONL)."),
) -> None:
    """Shared options for every command."""
    settings: dict[str, Any] = {}
    if config:
        with config.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle) or {}
        try:
            settings = load_config(loaded).to_settings()
        except ValidationError as exc:
            raise typer.BadParameter(str(exc), param_name="config") from exc

    if state:
        settings.setdefault("storage", {})["path"] = str(state)

    configure_logging(log_level)

    container = create_container(settings=settings)
    audit_logger = AuditLogger(audit_log) if audit_log else None
    ctx.obj = {"pipeline": container.pipeline(audit_logger=audit_logger)}


@app.command()
def project(
    ctx: typer.Context,
    name: Optional[str] = typer.Option(None, help="Project name."),
    school: Optional[str] = typer.Option(None, help="School / class."),
) -> None:
    """Show or update project details."""
    pipeline = _pipeline(ctx)
    if name is not None or school is not None:
        state = pipeline.configure_project(name=name, school=school)
    else:
        state = pipeline.load()
    info = state.project
    typer.echo(f"{info.name} | {info.school or '-'} | {STRATEGY_LABELS.get(info.strategy, info.strategy)}")


@app.command()
def rename(ctx: typer.Context, candidate_id: str, name: str) -> None:
    """Rename a candidate."""
    try:
        _pipeline(ctx).rename_candidate(candidate_id, name)
    except KeyError as exc:
        _fail(str(exc.args[0]))
    typer.echo(f"{candidate_id}: {name}")


@app.command()
def score(ctx: typer.Context, candidate_id: str, question: int, value: int) -> None:
    """Record a rubric score (0-4) for one question."""
    try:
        _pipeline(ctx).record_score(candidate_id, question, value)
    except KeyError as exc:
        _fail(str(exc.args[0]))
    except ValueError as exc:
        _fail(str(exc))
    typer.echo(f"{candidate_id}: Q{question} = {value}")


@app.command()
def notes(ctx: typer.Context, candidate_id: str, text: str) -> None:
    """Replace a candidate's interview notes."""
    try:
        _pipeline(ctx).set_notes(candidate_id, text)
    except KeyError as exc:
        _fail(str(exc.args[0]))
    typer.echo(f"{candidate_id}: notes saved")


@app.command()
def complete(ctx: typer.Context, candidate_id: str) -> None:
    """Mark a candidate's interview as done."""
    try:
        _pipeline(ctx).complete_interview(candidate_id)
    except KeyError as exc:
        _fail(str(exc.args[0]))
    except ValueError as exc:
        _fail(str(exc))
    typer.echo(f"{candidate_id}: done")


@app.command()
def questions(
    question: Optional[int] = typer.Argument(None, min=1, max=10, help="Show a single question."),
) -> None:
    """Print the interview questions and the rubric levels."""
    selected = [get_question(question)] if question is not None else QUESTIONS
    for item in selected:
        minutes, seconds = divmod(item.time_seconds, 60)
        typer.echo(f"Q{item.id} [{item.category}] {minutes}:{seconds:02d} {item.text}")
    typer.echo("Rubrica:")
    for level, description in RUBRIC.items():
        typer.echo(f"  {level}: {description}")


@app.command()
def status(ctx: typer.Context) -> None:
    """List candidates and interview progress."""
    pipeline = _pipeline(ctx)
    state = pipeline.load()
    done = sum(1 for c in state.candidates if c.status == "done")
    typer.echo(f"Entrevistas completas: {done}/{len(state.candidates)}")
    for candidate in state.candidates:
        typer.echo(f"{candidate.id}\t{candidate.status}\t{len(candidate.scores)}/10\t{candidate.name}")
    for violation in pipeline.setup_violations():
        typer.echo(f"! {violation}")


@app.command()
def rankings(ctx: typer.Context) -> None:
    """Print per-profile rankings of completed candidates."""
    tables = _pipeline(ctx).rankings()
    for key, table in tables.items():
        suffix = " (empate técnico no topo)" if table.top_tie else ""
        typer.echo(f"== {ROLE_LABELS[key]}{suffix}")
        for position, candidate in enumerate(table.entries, start=1):
            typer.echo(f"{position}. {candidate.name} {candidate.profiles.get(key):.2f}")


@app.command()
def suggest(ctx: typer.Context) -> None:
    """Generate the suggested final order from the greedy role assignment."""
    try:
        state = _pipeline(ctx).suggest_final_order()
    except IncompleteDatasetError as exc:
        _fail(str(exc))
    names = {c.id: c.name for c in state.candidates}
    for position, entry in enumerate(state.final_order, start=1):
        typer.echo(f"{position}. {names[entry.id]} [{ROLE_LABELS[entry.role_assigned]}]")


@app.command()
def move(
    ctx: typer.Context,
    position: int = typer.Argument(..., min=1, help="1-based position in the final order."),
    up: bool = typer.Option(True, "--up/--down", help="Direction to move."),
) -> None:
    """Swap an entry of the final order with its neighbour."""
    state = _pipeline(ctx).move(position - 1, -1 if up else 1)
    typer.echo(" ".join(entry.id for entry in state.final_order))


@app.command()
def validate(ctx: typer.Context) -> None:
    """Check the final order; exits with code 1 when violations exist."""
    violations = _pipeline(ctx).validate()
    if violations:
        for violation in violations:
            typer.echo(violation, err=True)
        raise typer.Exit(code=1)
    typer.echo("Lista final válida.")


@app.command()
def report(
    ctx: typer.Context,
    output: Path = typer.Option(..., dir_okay=False, resolve_path=True, help="Output JSON path."),
) -> None:
    """Write the final list as a JSON report."""
    try:
        _pipeline(ctx).write_report(output)
    except FinalOrderInvalidError as exc:
        _fail("\n".join(exc.violations))
    typer.echo(f"Report saved to {output}.")


@app.command()
def reset(
    ctx: typer.Context,
    yes: bool = typer.Option(False, "--yes", help="Skip confirmation."),
) -> None:
    """Delete all stored data and start from the default candidates."""
    if not yes:
        typer.confirm("Isto vai apagar todos os dados, nomes e notas. Continuar?", abort=True)
    _pipeline(ctx).reset()
    typer.echo("Reset efetuado.")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
