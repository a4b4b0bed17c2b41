"""Immutable template catalog and its query engine."""

from __future__ import annotations

from typing import Iterable, Iterator

from template_manager.constants import DEFAULT_OWNER
from template_manager.exceptions import TemplateNotFoundError

from .models import Query, TemplateEntry


def matches_owner(entry: TemplateEntry, owner: str, default_owner: str = DEFAULT_OWNER) -> bool:
    """Exact, case-sensitive owner match. Untagged entries belong to the default owner."""
    return (entry.owner or default_owner) == owner


def matches_search(entry: TemplateEntry, term: str) -> bool:
    """True if the lowercased term is in the name, category or content."""
    term = term.lower()
    return (
        term in entry.name.lower()
        or term in entry.category.lower()
        or term in entry.content.lower()
    )


def filter_entries(
    entries: Iterable[TemplateEntry],
    query: Query,
    default_owner: str = DEFAULT_OWNER,
) -> list[TemplateEntry]:
    """Apply the owner filter, then the search filter when the term isn't blank.

    Input order is preserved. An empty list is a normal result.
    """
    result = [e for e in entries if matches_owner(e, query.owner, default_owner)]
    if query.has_search:
        result = [e for e in result if matches_search(e, query.search_term)]
    return result


class Catalog:
    """Ordered, read-only collection of loaded templates.

    Built once per session. Order is manifest order and no query reorders it.
    """

    def __init__(self, entries: Iterable[TemplateEntry] = (), default_owner: str = DEFAULT_OWNER):
        self._entries: tuple[TemplateEntry, ...] = tuple(entries)
        self._default_owner = default_owner
        self._by_id: dict[str, TemplateEntry] = {}
        for entry in self._entries:
            if entry.id in self._by_id:
                raise ValueError(f"Duplicate template id: {entry.id}")
            self._by_id[entry.id] = entry

    @property
    def entries(self) -> tuple[TemplateEntry, ...]:
        return self._entries

    @property
    def default_owner(self) -> str:
        return self._default_owner

    def query(self, owner: str, search_term: str | None = "") -> list[TemplateEntry]:
        """Return one owner's templates, optionally narrowed by a search term."""
        q = Query(owner=owner, search_term=search_term or "")
        return filter_entries(self._entries, q, self._default_owner)

    def get(self, entry_id: str) -> TemplateEntry:
        """Look up a template by id.
        Raises:
            TemplateNotFoundError: If no template has that id.
        """
        try:
            return self._by_id[entry_id]
        except KeyError:
            raise TemplateNotFoundError(f"Template '{entry_id}' not found") from None

    def owners(self) -> list[str]:
        """Distinct owners in order of first appearance."""
        return list(dict.fromkeys(e.owner or self._default_owner for e in self._entries))

    def categories(self) -> list[str]:
        """Distinct categories in order of first appearance."""
        return list(dict.fromkeys(e.category for e in self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TemplateEntry]:
        return iter(self._entries)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._by_id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Catalog):
            return NotImplemented
        return self._entries == other._entries and self._default_owner == other._default_owner

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Catalog({len(self._entries)} templates)"
