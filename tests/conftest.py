# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Shared test configuration and fixtures."""

try:
    import pagemeta  # noqa: F401
except ImportError:
    raise ImportError("pagemeta is not installed. Run: pip install -e '.[dev]'") from None
