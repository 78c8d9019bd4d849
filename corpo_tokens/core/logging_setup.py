from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.now(tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = getattr(record, "context", None)
        if context:
            payload["context"] = context
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def resolve_level(level: str) -> int:
    """Traduce un nombre de nivel ("info", "DEBUG") a su valor numérico.

    Lanza ``ValueError`` para nombres que ``logging`` no conoce.
    """
    value = logging.getLevelName(str(level).strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Nivel de log desconocido: {level}")
    return value


def configure_logging(level: str = "INFO", stream: TextIO | None = None) -> None:
    """Instala un único handler JSON en el logger raíz.

    Por defecto escribe en stdout; la CLI pasa stderr para no mezclar los logs
    con su salida JSON.
    """
    numeric_level = resolve_level(level)
    handler = logging.StreamHandler(stream=stream or sys.stdout)
    handler.setFormatter(JsonFormatter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric_level)
