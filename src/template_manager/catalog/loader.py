"""Build a Catalog from a manifest and a content source.

Rows are fetched one at a time in manifest order by default. A row whose
fetch or processing fails is dropped and reported to the error sink; the
rest of the manifest still loads.
"""

from __future__ import annotations

import asyncio
from typing import Callable

from template_manager.config.logging import get_logger
from template_manager.constants import DEFAULT_OWNER

from .catalog import Catalog
from .models import Manifest, ManifestRow, TemplateEntry
from .naming import derive_name
from .sources import ContentSource, strip_live_preview

logger = get_logger(__name__)

ErrorSink = Callable[[str, BaseException], None]


def log_error(path: str, error: BaseException) -> None:
    """Default error sink: log and carry on."""
    logger.error("Error processing file %s: %s", path, error)


def build_entry(row: ManifestRow, content: str, default_owner: str = DEFAULT_OWNER) -> TemplateEntry:
    """Turn a fetched row into a TemplateEntry."""
    return TemplateEntry(
        id=row.entry_id,
        name=derive_name(row.group, row.filename),
        category=row.group.category,
        content=content,
        owner=row.owner or default_owner,
    )


async def _load_row(
    row: ManifestRow,
    source: ContentSource,
    error_sink: ErrorSink,
    default_owner: str,
) -> TemplateEntry | None:
    try:
        raw = await source.fetch(row.content_path)
        content = strip_live_preview(raw)
        if not content:
            logger.debug("Skipping empty template %s", row.content_path)
            return None
        return build_entry(row, content, default_owner)
    except Exception as e:
        error_sink(row.content_path, e)
        return None


async def load_catalog(
    manifest: Manifest,
    source: ContentSource,
    error_sink: ErrorSink | None = None,
    default_owner: str = DEFAULT_OWNER,
    concurrency: int = 1,
) -> Catalog:
    """Load every manifest row and assemble the catalog.

    Args:
        manifest: Static manifest describing what to load.
        source: Content source resolving each row's content path.
        error_sink: Receives (path, error) for every dropped row. Defaults to
            logging the failure.
        default_owner: Owner for rows that don't declare one.
        concurrency: Maximum fetches in flight. 1 fetches rows strictly one
            after another.
    Returns:
        Catalog whose entries follow manifest order.
    """
    if concurrency < 1:
        raise ValueError("concurrency must be at least 1")
    sink = error_sink or log_error
    rows = list(manifest.rows())
    if concurrency == 1:
        results = []
        for row in rows:
            results.append(await _load_row(row, source, sink, default_owner))
    else:
        sem = asyncio.Semaphore(concurrency)

        async def bounded(row: ManifestRow) -> TemplateEntry | None:
            async with sem:
                return await _load_row(row, source, sink, default_owner)

        # gather keeps results in argument order regardless of completion order
        results = await asyncio.gather(*(bounded(row) for row in rows))
    entries = [entry for entry in results if entry is not None]
    logger.info("Loaded %d of %d templates", len(entries), len(rows))
    return Catalog(entries, default_owner=default_owner)


def load_catalog_sync(
    manifest: Manifest,
    source: ContentSource,
    error_sink: ErrorSink | None = None,
    default_owner: str = DEFAULT_OWNER,
    concurrency: int = 1,
) -> Catalog:
    """Blocking wrapper around load_catalog() for callers without a loop."""
    return asyncio.run(
        load_catalog(
            manifest,
            source,
            error_sink=error_sink,
            default_owner=default_owner,
            concurrency=concurrency,
        )
    )
