"""Async table sources and text decoding helpers."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Protocol, Tuple, runtime_checkable

import anyio
import httpx


logger = logging.getLogger(__name__)

_REPLACEMENT_CHAR = "\ufffd"

# Mojibake and replacement-character variants seen in the historical export.
_NAME_REPAIRS: Tuple[Tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"L(?:\u00c3\u00ba|\ufffd{1,2}|(?:\u00ef\u00bf\u00bd){1,2}|\?)zardo"), "L\u00fazardo"),
    (re.compile(r"Jes(?:\u00c3\u00ba|\ufffd{1,2}|(?:\u00ef\u00bf\u00bd){1,2}|\?)s\b"), "Jes\u00fas"),
)


class SourceUnavailableError(RuntimeError):
    """Raised when a table source cannot be read."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason


@runtime_checkable
class TableSource(Protocol):
    async def fetch(self) -> bytes: ...

    def describe(self) -> str: ...


class FileTableSource:
    """Table stored on the local filesystem."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    async def fetch(self) -> bytes:
        try:
            return await anyio.Path(self.path).read_bytes()
        except OSError as exc:
            raise SourceUnavailableError(self.describe(), str(exc)) from exc

    def describe(self) -> str:
        return str(self.path)


class HttpTableSource:
    """Table served over HTTP, typically next to the site's static assets."""

    def __init__(self, url: str, *, client: httpx.AsyncClient | None = None):
        self.url = url
        self._client = client

    async def fetch(self) -> bytes:
        try:
            if self._client is not None:
                return await self._get(self._client)
            async with httpx.AsyncClient() as client:
                return await self._get(client)
        except httpx.HTTPError as exc:
            raise SourceUnavailableError(self.describe(), str(exc)) from exc

    async def _get(self, client: httpx.AsyncClient) -> bytes:
        resp = await client.get(self.url)
        resp.raise_for_status()
        return resp.content

    def describe(self) -> str:
        return self.url


class TextTableSource:
    """In-memory table, mostly useful for tests and pre-fetched payloads."""

    def __init__(self, text: str, *, label: str = "<memory>"):
        self.text = text
        self.label = label

    async def fetch(self) -> bytes:
        return self.text.encode("utf-8")

    def describe(self) -> str:
        return self.label


def decode_utf8(payload: bytes) -> str:
    return payload.decode("utf-8", errors="replace").removeprefix("\ufeff")


def decode_with_fallback(payload: bytes) -> str:
    """Decode preferring UTF-8, falling back to Latin-1 on invalid sequences."""

    try:
        text = payload.decode("utf-8")
    except UnicodeDecodeError:
        text = _REPLACEMENT_CHAR
    if _REPLACEMENT_CHAR in text:
        logger.debug("UTF-8 decode produced replacement characters; using latin-1")
        text = payload.decode("latin-1")
    return repair_known_names(text.removeprefix("\ufeff"))


def repair_known_names(text: str) -> str:
    for pattern, replacement in _NAME_REPAIRS:
        text = pattern.sub(replacement, text)
    return text


async def fetch_text(source: TableSource, *, fallback_encoding: bool = False) -> str:
    """Fetch ``source`` and decode it; raises :class:`SourceUnavailableError`."""

    payload = await source.fetch()
    if fallback_encoding:
        return decode_with_fallback(payload)
    return decode_utf8(payload)


__all__ = [
    "FileTableSource",
    "HttpTableSource",
    "SourceUnavailableError",
    "TableSource",
    "TextTableSource",
    "decode_utf8",
    "decode_with_fallback",
    "fetch_text",
    "repair_known_names",
]
