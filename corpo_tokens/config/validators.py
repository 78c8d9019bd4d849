from __future__ import annotations

import math
from typing import Any

from corpo_tokens.models.colors import Color


class InvalidConfigurationError(ValueError):
    """Valor de token rechazado en la frontera de ``configure``."""

    def __init__(self, field: str, value: Any, reason: str) -> None:
        super().__init__(f"Token '{field}' inválido ({value!r}): {reason}")
        self.field = field
        self.value = value
        self.reason = reason


def validate_color(field: str, value: Any) -> Color:
    try:
        return Color.parse(value)
    except ValueError as exc:
        raise InvalidConfigurationError(field, value, str(exc)) from exc


def _as_number(field: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidConfigurationError(field, value, "se esperaba un número")
    number = float(value)
    if not math.isfinite(number):
        raise InvalidConfigurationError(field, value, "el número debe ser finito")
    return number


def validate_positive_number(field: str, value: Any) -> float:
    number = _as_number(field, value)
    if number <= 0:
        raise InvalidConfigurationError(field, value, "debe ser mayor que cero")
    return number


def validate_non_negative_number(field: str, value: Any) -> float:
    number = _as_number(field, value)
    if number < 0:
        raise InvalidConfigurationError(field, value, "no puede ser negativo")
    return number


def validate_font_family(field: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidConfigurationError(field, value, "se esperaba un nombre de fuente no vacío")
    return value.strip()
