"""Content sources: resolve manifest content paths to raw text.

A content source is anything with an async ``fetch(path) -> str`` that raises
FetchError when the path cannot be retrieved. Path strings are logical,
manifest-relative identifiers; each source owns its own resolution.
"""

from __future__ import annotations

import asyncio
import os
import re
from pathlib import Path
from typing import Mapping, Protocol, runtime_checkable
from urllib.parse import quote

import httpx

from template_manager.config.logging import get_logger
from template_manager.constants import LIVE_PREVIEW_SCRIPT_PATTERN, Timeouts
from template_manager.exceptions import FetchError

logger = get_logger(__name__)

_LIVE_PREVIEW_SCRIPT = re.compile(LIVE_PREVIEW_SCRIPT_PATTERN)


def strip_live_preview(content: str) -> str:
    """Remove the editor live-preview script tag injected into served HTML."""
    return _LIVE_PREVIEW_SCRIPT.sub("", content)


@runtime_checkable
class ContentSource(Protocol):
    async def fetch(self, path: str) -> str:
        """Return raw text for ``path`` or raise FetchError."""
        ...


def safe_resolve_path(base: Path, relative: str) -> Path:
    """Resolve path safely, preventing traversal outside ``base`` (including symlinks)."""
    resolved = (base / relative).resolve()
    base_resolved = base.resolve()
    # commonpath avoids the /base vs /base2 prefix bug
    try:
        common = Path(os.path.commonpath([str(base_resolved), str(resolved)]))
    except ValueError:
        raise ValueError("Path traversal detected")
    if common != base_resolved:
        raise ValueError("Path traversal detected")
    return resolved


class DirectoryContentSource:
    """Reads template files from a local directory."""

    def __init__(self, root: Path, encoding: str = "utf-8"):
        self._root = Path(root)
        self._encoding = encoding

    @property
    def root(self) -> Path:
        return self._root

    def _read(self, path: str) -> str:
        try:
            fp = safe_resolve_path(self._root, path)
        except ValueError as e:
            raise FetchError(path, f"Refusing to read {path}", details=str(e)) from e
        if not fp.is_file():
            raise FetchError(path, f"Template file not found: {path}")
        try:
            return fp.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise FetchError(path, f"Failed to read {path}", details=str(e)) from e

    async def fetch(self, path: str) -> str:
        return await asyncio.to_thread(self._read, path)


class HttpContentSource:
    """Fetches template files over HTTP relative to a base URL.

    Pass an ``httpx.AsyncClient`` to share a connection pool; otherwise the
    source creates one and closes it in ``aclose()``.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = Timeouts.CONTENT_FETCH,
        client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/") + "/"
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)

    def url_for(self, path: str) -> str:
        return self._base_url + quote(path.lstrip("/"))

    async def fetch(self, path: str) -> str:
        url = self.url_for(path)
        try:
            response = await self._client.get(url)
        except httpx.HTTPError as e:
            raise FetchError(path, f"Request failed for {url}", details=str(e)) from e
        if not response.is_success:
            raise FetchError(path, f"HTTP error! status: {response.status_code}")
        return response.text

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpContentSource:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


class MappingContentSource:
    """In-memory source backed by a path -> text mapping.

    A value that is an exception instance is raised for that path, which
    makes individual failures easy to stage.
    """

    def __init__(self, contents: Mapping[str, str | BaseException]):
        self._contents = dict(contents)

    async def fetch(self, path: str) -> str:
        if path not in self._contents:
            raise FetchError(path, f"Template file not found: {path}")
        value = self._contents[path]
        if isinstance(value, BaseException):
            raise value
        return value
