# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""structlog + stdlib bridge. Console: ConsoleRenderer, JSON: JSONRenderer.

Leaf module — no pagemeta imports. Opt-in: importing pagemeta never
configures logging; applications call configure() at startup.

Environment:
    PAGEMETA_LOG_LEVEL: root level when ``level`` is not given (default INFO).
    PAGEMETA_LOG_JSON: "1"/"true"/"yes" selects JSON output when
        ``json_output`` is not given.
"""

from __future__ import annotations

import logging
import os
import sys

import structlog

_TRUTHY = frozenset({"1", "true", "yes"})


def _env_json_output() -> bool:
    return os.environ.get("PAGEMETA_LOG_JSON", "").strip().lower() in _TRUTHY


def _env_level() -> str:
    return os.environ.get("PAGEMETA_LOG_LEVEL", "").strip() or "INFO"


def _formatter(json_output: bool) -> structlog.stdlib.ProcessorFormatter:
    """Render stdlib records through structlog; no global structlog state."""
    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    return structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
        ],
    )


def configure(*, json_output: bool | None = None, level: str | None = None) -> None:
    """Install one stderr handler on the root logger.

    pagemeta logs through ``logging.getLogger(__name__)``; this only decides
    how those records (and the application's) are rendered.

    Args:
        json_output: True for JSON lines, False for human-readable output.
            None reads PAGEMETA_LOG_JSON.
        level: Root logger level. None reads PAGEMETA_LOG_LEVEL (default INFO).
    """
    if json_output is None:
        json_output = _env_json_output()
    if level is None:
        level = _env_level()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter(json_output))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
