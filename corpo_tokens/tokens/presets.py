from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from corpo_tokens.tokens.store import DesignTokens, TokenStore, get_token_store

logger = logging.getLogger(__name__)


class UnknownPresetError(KeyError):
    pass


@dataclass(frozen=True, slots=True)
class ThemePreset:
    key: str
    name: str
    description: str
    values: Mapping[str, Any]


# Los presets son sobrescrituras parciales: los campos que no nombran
# conservan el valor previo del store.
PRESETS: dict[str, ThemePreset] = {
    "corporate": ThemePreset(
        key="corporate",
        name="Corporate",
        description="Azul profesional (por defecto)",
        values={"primary_color": "#3182CE", "border_radius": 8, "base_spacing": 4, "font_family": "Inter"},
    ),
    "modern": ThemePreset(
        key="modern",
        name="Modern",
        description="Violeta moderno",
        values={
            "primary_color": "#7C3AED",
            "secondary_color": "#8B5CF6",
            "border_radius": 12,
            "base_spacing": 6,
            "font_family": "SF Pro Display",
        },
    ),
    "friendly": ThemePreset(
        key="friendly",
        name="Friendly",
        description="Naranja cálido",
        values={
            "primary_color": "#EA580C",
            "success_color": "#16A34A",
            "border_radius": 16,
            "base_spacing": 8,
            "font_family": "Poppins",
        },
    ),
    "minimal": ThemePreset(
        key="minimal",
        name="Minimal",
        description="Blanco y negro minimalista",
        values={
            "primary_color": "#000000",
            "secondary_color": "#6B7280",
            "border_radius": 4,
            "base_spacing": 4,
            "font_family": "SF Mono",
        },
    ),
    "gaming": ThemePreset(
        key="gaming",
        name="Gaming",
        description="Neón sobre superficie oscura",
        values={
            "primary_color": "#22D3EE",
            "secondary_color": "#A855F7",
            "surface_color": "#0F172A",
            "text_primary": "#F8FAFC",
            "text_secondary": "#CBD5E1",
            "border_radius": 6,
            "base_spacing": 4,
            "font_family": "Orbitron",
        },
    ),
    "nature": ThemePreset(
        key="nature",
        name="Nature",
        description="Verdes y tierra",
        values={
            "primary_color": "#15803D",
            "secondary_color": "#A16207",
            "success_color": "#65A30D",
            "border_radius": 12,
            "base_spacing": 6,
            "font_family": "Nunito",
        },
    ),
    "luxury": ThemePreset(
        key="luxury",
        name="Luxury",
        description="Dorado sobre negro",
        values={
            "primary_color": "#B8860B",
            "secondary_color": "#1C1917",
            "surface_color": "#FAFAF9",
            "border_radius": 2,
            "base_spacing": 6,
            "font_family": "Playfair Display",
        },
    ),
    "banking": ThemePreset(
        key="banking",
        name="Banking",
        description="Azul marino sobrio",
        values={
            "primary_color": "#1E3A8A",
            "secondary_color": "#475569",
            "border_radius": 4,
            "base_spacing": 4,
            "font_family": "IBM Plex Sans",
        },
    ),
    "healthcare": ThemePreset(
        key="healthcare",
        name="Healthcare",
        description="Turquesa clínico",
        values={
            "primary_color": "#0D9488",
            "secondary_color": "#0284C7",
            "info_color": "#0284C7",
            "border_radius": 10,
            "base_spacing": 5,
            "font_family": "Source Sans Pro",
        },
    ),
    "creative": ThemePreset(
        key="creative",
        name="Creative",
        description="Magenta expresivo",
        values={
            "primary_color": "#DB2777",
            "secondary_color": "#F59E0B",
            "border_radius": 20,
            "base_spacing": 8,
            "font_family": "Montserrat",
        },
    ),
    "sunset": ThemePreset(
        key="sunset",
        name="Sunset",
        description="Coral y ámbar",
        values={
            "primary_color": "#F97316",
            "secondary_color": "#E11D48",
            "warning_color": "#F59E0B",
            "border_radius": 14,
            "base_spacing": 6,
            "font_family": "Quicksand",
        },
    ),
    "ocean": ThemePreset(
        key="ocean",
        name="Ocean",
        description="Azules marinos profundos",
        values={
            "primary_color": "#0369A1",
            "secondary_color": "#0E7490",
            "info_color": "#0EA5E9",
            "border_radius": 12,
            "base_spacing": 6,
            "font_family": "Lato",
        },
    ),
}


def list_presets() -> list[ThemePreset]:
    return list(PRESETS.values())


def get_preset(key: str) -> ThemePreset:
    """Busca un preset sin distinguir mayúsculas ni espacios alrededor."""
    preset = PRESETS.get(key.strip().lower())
    if preset is None:
        available = ", ".join(sorted(PRESETS))
        raise UnknownPresetError(f"Preset desconocido '{key}'. Disponibles: {available}")
    return preset


def apply_preset(key: str, store: TokenStore | None = None, reset: bool = False) -> DesignTokens:
    """Aplica un preset por clave.

    Con ``reset=True`` el store vuelve primero a los valores por defecto, de modo
    que el resultado no depende de presets aplicados anteriormente.
    """
    preset = get_preset(key)
    target = store if store is not None else get_token_store()
    tokens = target.update(preset.values, reset=reset)
    logger.info("Preset aplicado: %s", preset.key, extra={"context": {"reset": reset}})
    return tokens


def apply_corporate_theme(store: TokenStore | None = None, reset: bool = False) -> DesignTokens:
    return apply_preset("corporate", store, reset)


def apply_modern_theme(store: TokenStore | None = None, reset: bool = False) -> DesignTokens:
    return apply_preset("modern", store, reset)


def apply_friendly_theme(store: TokenStore | None = None, reset: bool = False) -> DesignTokens:
    return apply_preset("friendly", store, reset)


def apply_minimal_theme(store: TokenStore | None = None, reset: bool = False) -> DesignTokens:
    return apply_preset("minimal", store, reset)


def apply_gaming_theme(store: TokenStore | None = None, reset: bool = False) -> DesignTokens:
    return apply_preset("gaming", store, reset)


def apply_nature_theme(store: TokenStore | None = None, reset: bool = False) -> DesignTokens:
    return apply_preset("nature", store, reset)


def apply_luxury_theme(store: TokenStore | None = None, reset: bool = False) -> DesignTokens:
    return apply_preset("luxury", store, reset)


def apply_banking_theme(store: TokenStore | None = None, reset: bool = False) -> DesignTokens:
    return apply_preset("banking", store, reset)


def apply_healthcare_theme(store: TokenStore | None = None, reset: bool = False) -> DesignTokens:
    return apply_preset("healthcare", store, reset)


def apply_creative_theme(store: TokenStore | None = None, reset: bool = False) -> DesignTokens:
    return apply_preset("creative", store, reset)


def apply_sunset_theme(store: TokenStore | None = None, reset: bool = False) -> DesignTokens:
    return apply_preset("sunset", store, reset)


def apply_ocean_theme(store: TokenStore | None = None, reset: bool = False) -> DesignTokens:
    return apply_preset("ocean", store, reset)
