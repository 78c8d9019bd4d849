from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from corpo_tokens.config.settings import AppSettings, SettingsLoader, apply_settings
from corpo_tokens.config.validators import InvalidConfigurationError
from corpo_tokens.contrast.validator import (
    ColorBlindness,
    TextSize,
    WCAGLevel,
    adjust_for_contrast,
    contrast_ratio,
    simulate_color_blindness,
    validate_contrast,
)
from corpo_tokens.core.logging_setup import configure_logging
from corpo_tokens.models.colors import Color
from corpo_tokens.tokens.presets import PRESETS, UnknownPresetError, apply_preset, list_presets
from corpo_tokens.tokens.store import TokenStore


def _color(value: str) -> Color:
    try:
        return Color.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="corpo-tokens", description="Tokens de diseño y contraste WCAG")
    parser.add_argument("--config", default=None, help="Ruta del archivo YAML de tokens")

    sub = parser.add_subparsers(dest="command", required=True)

    p_show = sub.add_parser("show", help="Muestra los tokens vigentes")
    p_show.add_argument("--preset", choices=sorted(PRESETS))
    p_show.add_argument("--reset", action="store_true", help="Restablece antes de aplicar el preset")
    p_show.add_argument("--derived", action="store_true", help="Incluye valores derivados")

    sub.add_parser("presets", help="Lista los presets disponibles")

    p_contrast = sub.add_parser("contrast", help="Valida el contraste de dos colores")
    p_contrast.add_argument("foreground", type=_color)
    p_contrast.add_argument("background", type=_color)
    p_contrast.add_argument("--level", choices=[lvl.value for lvl in WCAGLevel], default=WCAGLevel.AA.value)
    p_contrast.add_argument("--ratio", type=float, default=None, help="Relación para --level custom")
    p_contrast.add_argument("--large", action="store_true", help="Texto grande")

    p_adjust = sub.add_parser("adjust", help="Ajusta un color hasta alcanzar un contraste")
    p_adjust.add_argument("foreground", type=_color)
    p_adjust.add_argument("background", type=_color)
    p_adjust.add_argument("--ratio", type=float, default=4.5)
    p_adjust.add_argument("--background-side", action="store_true", help="Ajusta el fondo en lugar del texto")

    p_simulate = sub.add_parser("simulate", help="Simula daltonismo sobre un color")
    p_simulate.add_argument("color", type=_color)
    p_simulate.add_argument("--type", dest="kind", choices=[k.value for k in ColorBlindness], default=None)

    p_text = sub.add_parser("text-color", help="Color de texto recomendado para un fondo")
    p_text.add_argument("background", type=_color)

    p_init = sub.add_parser("init-config", help="Genera YAML por defecto")
    p_init.add_argument("--output", default="corpo_tokens.yaml")
    return parser


def _load_store(config_path: str | None) -> tuple[TokenStore, AppSettings]:
    store = TokenStore()
    if config_path is None:
        return store, AppSettings()
    settings = SettingsLoader.load(config_path)
    apply_settings(settings, store)
    return store, settings


def _emit(payload: Any) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "init-config":
        SettingsLoader.dump_default(args.output)
        print(f"Configuración creada en {args.output}")
        return 0

    if args.config is not None and not Path(args.config).exists():
        parser.error(f"No existe el archivo de configuración: {args.config}")

    try:
        store, settings = _load_store(args.config)
        configure_logging(settings.log_level, stream=sys.stderr)
    except (InvalidConfigurationError, UnknownPresetError, ValueError) as exc:
        parser.error(str(exc))

    if args.command == "show":
        if args.preset:
            apply_preset(args.preset, store, reset=args.reset)
        _emit(store.snapshot().to_dict(include_derived=args.derived))
    elif args.command == "presets":
        _emit([{"key": p.key, "name": p.name, "description": p.description} for p in list_presets()])
    elif args.command == "contrast":
        text_size = TextSize.LARGE if args.large else TextSize.NORMAL
        result = validate_contrast(args.foreground, args.background, args.level, text_size, args.ratio)
        _emit(result.to_dict())
        return 0 if result.is_compliant else 1
    elif args.command == "adjust":
        result = adjust_for_contrast(
            args.foreground,
            args.background,
            args.ratio,
            adjust_foreground=not args.background_side,
        )
        _emit(result.to_dict())
        return 0 if result.achieved else 1
    elif args.command == "simulate":
        kinds = [ColorBlindness(args.kind)] if args.kind else list(ColorBlindness)
        _emit({kind.value: simulate_color_blindness(args.color, kind).to_hex() for kind in kinds})
    elif args.command == "text-color":
        text = store.text_color_for(args.background)
        _emit({"background": args.background.to_hex(), "text": text.to_hex(), "ratio": round(contrast_ratio(text, args.background), 2)})
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
