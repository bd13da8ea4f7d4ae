# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Immutable value records: Feed, Image, Video, Favicon.

Every record requires a non-empty identifying field (``href`` / ``url``)
and raises InvalidArgumentError otherwise. Image and video dimensions are
kept as the raw attribute strings.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

from pagemeta.errors import InvalidArgumentError


def _extname(ref: str) -> str | None:
    """Lower-cased extension (".svg") of a URL path, ignoring query and fragment."""
    path = ref
    for sep in ("?", "#"):
        path = path.split(sep, 1)[0]
    dot = path.rfind(".")
    if dot == -1 or dot < path.rfind("/"):
        return None
    return path[dot:].lower()


def _require(value: str, record: str, field_name: str) -> None:
    if not isinstance(value, str) or not value:
        raise InvalidArgumentError(f"{record}: {field_name} is required")


@dataclass(frozen=True, slots=True)
class Feed:
    """RSS/Atom/JSON feed advertised via ``<link rel="alternate">``."""

    href: str
    title: str | None = None
    type: str | None = None

    def __post_init__(self) -> None:
        _require(self.href, "Feed", "href")


@dataclass(frozen=True, slots=True)
class Image:
    """Open Graph image (``og:image`` and its structured properties)."""

    url: str
    secure_url: str | None = None
    type: str | None = None
    width: str | None = None
    height: str | None = None
    alt: str | None = None

    def __post_init__(self) -> None:
        _require(self.url, "Image", "url")


@dataclass(frozen=True, slots=True)
class Video:
    """Open Graph video (``og:video`` and its structured properties)."""

    url: str
    secure_url: str | None = None
    type: str | None = None
    width: str | None = None
    height: str | None = None
    alt: str | None = None

    def __post_init__(self) -> None:
        _require(self.url, "Video", "url")

    @property
    def extname(self) -> str | None:
        return _extname(self.url)


@dataclass(frozen=True, slots=True)
class Favicon:
    """Favicon candidate from ``<link rel="icon">`` or ``<link rel="shortcut icon">``."""

    href: str
    rel: str | None = None
    type: str | None = None
    sizes: str | None = None

    def __post_init__(self) -> None:
        _require(self.href, "Favicon", "href")

    @property
    def extname(self) -> str | None:
        return _extname(self.href)


def record_to_dict(record: Feed | Image | Video | Favicon) -> dict[str, str]:
    """Plain dict of the set fields, with camelCase ``secureUrl``."""
    out: dict[str, str] = {}
    for key, value in asdict(record).items():
        if value is None:
            continue
        out["secureUrl" if key == "secure_url" else key] = value
    return out
