from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from corpo_tokens.core.logging_setup import resolve_level
from corpo_tokens.tokens.presets import PRESETS, UnknownPresetError, get_preset
from corpo_tokens.tokens.store import DesignTokens, TokenStore, get_token_store, validate_token_fields

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AppSettings:
    log_level: str = "INFO"
    preset: str | None = None
    reset_before_preset: bool = True
    tokens: dict[str, Any] = field(default_factory=dict)


class SettingsLoader:
    @staticmethod
    def _loads(text: str) -> dict[str, Any]:
        data = yaml.safe_load(text)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError("Configuración inválida: se esperaba un mapeo YAML")
        return data

    @staticmethod
    def _dumps(payload: dict[str, Any]) -> str:
        return yaml.safe_dump(payload, sort_keys=False, allow_unicode=True)

    @staticmethod
    def load(path: str | Path) -> AppSettings:
        content = SettingsLoader._loads(Path(path).read_text(encoding="utf-8"))

        preset = content.get("preset")
        if preset is not None and str(preset).strip().lower() not in PRESETS:
            raise UnknownPresetError(f"Preset desconocido en {path}: {preset}")

        tokens = content.get("tokens") or {}
        if not isinstance(tokens, dict):
            raise ValueError("Configuración inválida: 'tokens' debe ser un mapeo")
        # Se valida al cargar para que un fichero erróneo falle antes de tocar el store.
        validate_token_fields(tokens)

        log_level = str(content.get("log_level", "INFO")).strip().upper()
        resolve_level(log_level)

        reset_before_preset = content.get("reset_before_preset", True)
        if not isinstance(reset_before_preset, bool):
            raise ValueError("Configuración inválida: 'reset_before_preset' debe ser true o false")

        return AppSettings(
            log_level=log_level,
            preset=str(preset).strip().lower() if preset is not None else None,
            reset_before_preset=reset_before_preset,
            tokens=dict(tokens),
        )

    @staticmethod
    def dump_default(path: str | Path) -> None:
        defaults = AppSettings(preset="corporate")
        payload: dict[str, Any] = {
            "log_level": defaults.log_level,
            "preset": defaults.preset,
            "reset_before_preset": defaults.reset_before_preset,
            "tokens": DesignTokens().to_dict(),
        }
        Path(path).write_text(SettingsLoader._dumps(payload), encoding="utf-8")

    @staticmethod
    def dump_tokens(tokens: DesignTokens, path: str | Path, log_level: str = "INFO") -> None:
        payload: dict[str, Any] = {
            "log_level": log_level,
            "preset": None,
            "reset_before_preset": True,
            "tokens": tokens.to_dict(),
        }
        Path(path).write_text(SettingsLoader._dumps(payload), encoding="utf-8")


def apply_settings(settings: AppSettings, store: TokenStore | None = None) -> DesignTokens:
    """Aplica preset y tokens explícitos en un único swap del store."""
    target = store if store is not None else get_token_store()
    values: dict[str, Any] = {}
    reset = False
    if settings.preset is not None:
        values.update(get_preset(settings.preset).values)
        reset = settings.reset_before_preset
    values.update(settings.tokens)
    tokens = target.update(values, reset=reset)
    logger.info(
        "Configuración aplicada",
        extra={"context": {"preset": settings.preset, "overrides": sorted(settings.tokens)}},
    )
    return tokens
