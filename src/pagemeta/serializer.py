# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""PageMeta serialization to plain JSON-compatible data.

Field names follow the snapshot fixture format (camelCase for the derived
accessors). Records drop unset fields; scalar accessors that resolve to
None are omitted.
"""

from __future__ import annotations

import json
from typing import Any

from pagemeta.records import record_to_dict
from pagemeta.snapshot import PageMeta


def _sorted_mapping(mapping: dict[str, Any]) -> dict[str, Any]:
    return {key: mapping[key] for key in sorted(mapping)}


def to_dict(page_meta: PageMeta) -> dict[str, Any]:
    """Serialize PageMeta, including derived accessors, to a plain dict."""
    data: dict[str, Any] = {
        "meta": _sorted_mapping({k: list(v) for k, v in page_meta.meta.items()}),
        "other": _sorted_mapping(page_meta.other),
        "feeds": [record_to_dict(f) for f in page_meta.feeds],
        "images": [record_to_dict(i) for i in page_meta.images],
        "favicons": [record_to_dict(f) for f in page_meta.favicons],
        "videos": [record_to_dict(v) for v in page_meta.videos],
        "jsonld": page_meta.jsonld,
        "microdata": [item.to_dict() for item in page_meta.microdata],
        "canonicalUrl": page_meta.canonical_url,
        "title": page_meta.title,
        "description": page_meta.description,
        "image": page_meta.image,
        "url": page_meta.url,
        "siteName": page_meta.site_name,
        "openGraphObject": page_meta.open_graph_object,
        "favicon": page_meta.favicon,
    }
    return {k: v for k, v in data.items() if v is not None}


def to_json(page_meta: PageMeta, indent: int = 2) -> str:
    """Serialize PageMeta to a JSON string.

    Args:
        page_meta: Snapshot to serialize
        indent: JSON indentation level

    Returns:
        JSON string
    """
    return json.dumps(to_dict(page_meta), indent=indent, ensure_ascii=False)
