"""Dependency injection container for the selection tool."""

from __future__ import annotations

from dependency_injector import containers, providers

from .core import AssignmentPlanner, EvaluationEngine, RankingConfig, RankingEngine
from .pipeline import SelectionPipeline
from .storage import DEFAULT_STATE_PATH, StateStore


class SelectionContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration(
        default={"storage": {"path": str(DEFAULT_STATE_PATH)}},
    )

    ranking_engine = providers.Singleton(RankingEngine)

    assignment_planner = providers.Singleton(
        AssignmentPlanner,
        ranking=ranking_engine,
    )

    evaluation_engine = providers.Singleton(
        EvaluationEngine,
        ranking=ranking_engine,
        planner=assignment_planner,
    )

    state_store = providers.Singleton(
        StateStore,
        path=config.storage.path,
    )

    pipeline = providers.Factory(
        SelectionPipeline,
        engine=evaluation_engine,
        store=state_store,
    )


def create_container(*, settings: dict | None = None) -> SelectionContainer:
    """Instantiate container with optional overrides."""

    container = SelectionContainer()

    if not settings:
        return container

    storage_settings = settings.get("storage", {}) if isinstance(settings, dict) else {}
    if storage_settings:
        container.config.from_dict({"storage": storage_settings})

    ranking_settings = settings.get("ranking", {}) if isinstance(settings, dict) else {}
    if ranking_settings:
        ranking_config = RankingConfig(**ranking_settings)
        container.ranking_engine.override(
            providers.Singleton(RankingEngine, config=ranking_config)
        )

    return container
