# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""pagemeta exception hierarchy.

All pagemeta-specific errors inherit from PageMetaError. Malformed page
content (bad JSON-LD, microdata cycles, missing attributes) never raises;
only caller programming errors do.
"""

from __future__ import annotations


class PageMetaError(Exception):
    """Base exception for all pagemeta errors."""


class InvalidArgumentError(PageMetaError, TypeError):
    """Invalid input to extract() or a value record constructor."""
