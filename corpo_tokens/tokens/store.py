from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Mapping

from corpo_tokens.config.validators import (
    InvalidConfigurationError,
    validate_color,
    validate_font_family,
    validate_non_negative_number,
    validate_positive_number,
)
from corpo_tokens.contrast.validator import relative_luminance
from corpo_tokens.models.colors import WHITE, Color, ColorLike

logger = logging.getLogger(__name__)

LIGHTNESS_VARIANT_STEP = 0.2
LIGHT_BACKGROUND_THRESHOLD = 0.5
SPACING_MULTIPLES = (1, 2, 3, 4, 6, 8, 12, 16)


@dataclass(frozen=True, slots=True)
class DesignTokens:
    primary_color: Color = Color.from_hex("#3182CE")
    secondary_color: Color = Color.from_hex("#718096")
    surface_color: Color = Color.from_hex("#FFFFFF")
    text_primary: Color = Color.from_hex("#1A202C")
    text_secondary: Color = Color.from_hex("#4A5568")
    success_color: Color = Color.from_hex("#38A169")
    warning_color: Color = Color.from_hex("#D69E2E")
    error_color: Color = Color.from_hex("#E53E3E")
    info_color: Color = Color.from_hex("#3182CE")
    base_spacing: float = 4.0
    base_font_size: float = 14.0
    font_family: str = "Inter"
    border_radius: float = 8.0
    border_radius_small: float = 4.0
    border_radius_large: float = 16.0

    @property
    def background_color(self) -> Color:
        return self.surface_color

    def spacing(self, multiple: float) -> float:
        return self.base_spacing * multiple

    @property
    def spacing_1x(self) -> float:
        return self.base_spacing

    @property
    def spacing_2x(self) -> float:
        return self.base_spacing * 2

    @property
    def spacing_3x(self) -> float:
        return self.base_spacing * 3

    @property
    def spacing_4x(self) -> float:
        return self.base_spacing * 4

    @property
    def spacing_6x(self) -> float:
        return self.base_spacing * 6

    @property
    def spacing_8x(self) -> float:
        return self.base_spacing * 8

    @property
    def spacing_12x(self) -> float:
        return self.base_spacing * 12

    @property
    def spacing_16x(self) -> float:
        return self.base_spacing * 16

    @property
    def font_size_small(self) -> float:
        return self.base_font_size * 0.875

    @property
    def font_size_large(self) -> float:
        return self.base_font_size * 1.125

    @property
    def font_size_xlarge(self) -> float:
        return self.base_font_size * 1.25

    @property
    def font_size_xxlarge(self) -> float:
        return self.base_font_size * 1.5

    def primary_light(self) -> Color:
        return self.primary_color.shift_lightness(LIGHTNESS_VARIANT_STEP)

    def primary_dark(self) -> Color:
        return self.primary_color.shift_lightness(-LIGHTNESS_VARIANT_STEP)

    def text_color_for(self, background: ColorLike) -> Color:
        """Texto principal sobre fondos claros, blanco sobre fondos oscuros.

        Elección binaria por luminancia; no garantiza cumplir WCAG.
        """
        if relative_luminance(background) > LIGHT_BACKGROUND_THRESHOLD:
            return self.text_primary
        return WHITE

    def to_dict(self, include_derived: bool = False) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            payload[item.name] = value.to_hex() if isinstance(value, Color) else value
        if include_derived:
            payload["background_color"] = self.background_color.to_hex()
            payload["primary_light"] = self.primary_light().to_hex()
            payload["primary_dark"] = self.primary_dark().to_hex()
            for multiple in SPACING_MULTIPLES:
                payload[f"spacing_{multiple}x"] = self.spacing(multiple)
            payload["font_size_small"] = self.font_size_small
            payload["font_size_large"] = self.font_size_large
            payload["font_size_xlarge"] = self.font_size_xlarge
            payload["font_size_xxlarge"] = self.font_size_xxlarge
        return payload


_COLOR_FIELDS = {f.name for f in fields(DesignTokens) if f.type in ("Color", Color)}

_FIELD_VALIDATORS: dict[str, Callable[[str, Any], Any]] = {
    **{name: validate_color for name in _COLOR_FIELDS},
    "base_spacing": validate_positive_number,
    "base_font_size": validate_positive_number,
    "font_family": validate_font_family,
    "border_radius": validate_non_negative_number,
    "border_radius_small": validate_non_negative_number,
    "border_radius_large": validate_non_negative_number,
}

TOKEN_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(DesignTokens))


def validate_token_fields(values: dict[str, Any]) -> dict[str, Any]:
    """Normaliza y valida un conjunto parcial de tokens sin aplicarlo."""
    normalized: dict[str, Any] = {}
    for name, value in values.items():
        validator = _FIELD_VALIDATORS.get(name)
        if validator is None:
            raise InvalidConfigurationError(name, value, "token desconocido")
        normalized[name] = validator(name, value)
    return normalized


class TokenStore:
    """Contenedor mutable de tokens de diseño.

    Cada escritura construye un ``DesignTokens`` nuevo y lo sustituye de forma
    atómica; los lectores siempre observan una instantánea completa. Las lecturas
    de campos y valores derivados se delegan en la instantánea vigente.
    """

    def __init__(self, tokens: DesignTokens | None = None) -> None:
        self._lock = threading.RLock()
        self._tokens = tokens if tokens is not None else DesignTokens()

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self._tokens, name)

    def __setattr__(self, name: str, value: Any) -> None:
        # Asignar un token equivale a configure(): valida y sustituye la instantánea.
        if name.startswith("_"):
            object.__setattr__(self, name, value)
        elif name in TOKEN_FIELDS:
            self.update({name: value})
        else:
            raise AttributeError(f"'{name}' no es un token configurable; use configure()")

    def __repr__(self) -> str:
        return f"TokenStore({self._tokens!r})"

    def snapshot(self) -> DesignTokens:
        return self._tokens

    def configure(self, **values: Any) -> DesignTokens:
        return self.update(values)

    def update(self, values: Mapping[str, Any], reset: bool = False) -> DesignTokens:
        """Igual que ``configure``; con ``reset=True`` parte de los valores por defecto.

        La validación ocurre antes de tocar el estado: se aplican todos los campos o ninguno.
        """
        normalized = validate_token_fields(dict(values))
        if not normalized and not reset:
            return self._tokens
        with self._lock:
            base = DesignTokens() if reset else self._tokens
            self._tokens = replace(base, **normalized)
            current = self._tokens
        logger.debug(
            "Tokens actualizados",
            extra={"context": {"fields": sorted(normalized), "reset": reset}},
        )
        return current

    def reset_to_defaults(self) -> DesignTokens:
        with self._lock:
            self._tokens = DesignTokens()
            current = self._tokens
        logger.debug("Tokens restablecidos a valores por defecto")
        return current


_default_store: TokenStore | None = None
_default_store_lock = threading.Lock()


def get_token_store() -> TokenStore:
    """Instancia por defecto del proceso, creada de forma perezosa."""
    global _default_store
    if _default_store is None:
        with _default_store_lock:
            if _default_store is None:
                _default_store = TokenStore()
    return _default_store
