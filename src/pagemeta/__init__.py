# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""pagemeta — Open Graph, Twitter Card, favicon, feed, JSON-LD and microdata
extraction from parsed HTML documents.

    >>> from pagemeta import extract_html
    >>> meta = extract_html('<meta property="og:title" content="Hi">')
    >>> meta.title
    'Hi'
"""

from __future__ import annotations

from pagemeta.dom import Document, Element, LxmlDocument, LxmlElement
from pagemeta.errors import InvalidArgumentError, PageMetaError
from pagemeta.extractor import FEED_TYPES, extract, extract_html
from pagemeta.microdata import MicrodataItem
from pagemeta.records import Favicon, Feed, Image, Video
from pagemeta.serializer import to_dict, to_json
from pagemeta.snapshot import DEFAULT_FAVICON, PageMeta

__all__ = [
    "__version__",
    "DEFAULT_FAVICON",
    "Document",
    "Element",
    "FEED_TYPES",
    "Favicon",
    "Feed",
    "Image",
    "InvalidArgumentError",
    "LxmlDocument",
    "LxmlElement",
    "MicrodataItem",
    "PageMeta",
    "PageMetaError",
    "Video",
    "extract",
    "extract_html",
    "to_dict",
    "to_json",
]

__version__ = "0.6.0"
