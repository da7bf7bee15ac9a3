"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class RankingSettings(BaseModel):
    tie_band: float | None = None
    epsilon: float | None = None

    model_config = ConfigDict(extra="forbid")


class StorageSettings(BaseModel):
    path: str | None = None

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    ranking: RankingSettings = Field(default_factory=RankingSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        ranking = self.ranking.model_dump(exclude_none=True)
        if ranking:
            settings["ranking"] = ranking
        storage = self.storage.model_dump(exclude_none=True)
        if storage:
            settings["storage"] = storage
        return settings


def load_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
