from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from pjselection.container import create_container
from pjselection.schemas.config import AppConfig, load_config
from pjselection.storage import DEFAULT_STATE_PATH


def test_create_container_defaults():
    container = create_container()

    ranking = container.ranking_engine()
    store = container.state_store()

    assert ranking.config.tie_band == pytest.approx(0.2)
    assert ranking.config.epsilon == pytest.approx(1e-6)
    assert store.path == DEFAULT_STATE_PATH


def test_create_container_with_overrides(tmp_path: Path):
    state_path = tmp_path / "state.json"
    container = create_container(
        settings={
            "ranking": {"tie_band": 0.3},
            "storage": {"path": str(state_path)},
        }
    )

    engine = container.evaluation_engine()
    planner = container.assignment_planner()

    assert container.ranking_engine().config.tie_band == pytest.approx(0.3)
    assert container.ranking_engine().config.epsilon == pytest.approx(1e-6)
    assert engine._ranking is container.ranking_engine()
    assert planner._ranking.config.tie_band == pytest.approx(0.3)
    assert container.state_store().path == state_path
    assert container.pipeline()._store is container.state_store()


def test_load_config_validation():
    data = {
        "ranking": {"tie_band": 0.25},
        "storage": {"path": "data/state.json"},
    }
    app_config = load_config(data)
    assert isinstance(app_config, AppConfig)
    settings = app_config.to_settings()
    assert settings["ranking"] == {"tie_band": 0.25}
    assert settings["storage"]["path"] == "data/state.json"
    assert load_config({}).to_settings() == {}


def test_load_config_rejects_invalid_input():
    with pytest.raises(ValidationError):
        load_config(["not", "a", "mapping"])
    with pytest.raises(ValidationError):
        load_config({"ranking": {"band": 0.1}})
