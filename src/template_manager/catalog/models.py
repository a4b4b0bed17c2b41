"""Data models for the template catalog.

This module defines the manifest and catalog models:
- ManifestFile: one file of a group, with optional owner and path overrides
- SourceGroup: a named collection of template files sharing a naming rule set
- ManifestRow: one (group, filename, owner, content path) row of the manifest
- Manifest: the ordered, static list of groups known at start time
- TemplateEntry: one loaded template, immutable once created
- Query: an owner plus an optional search term
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Iterator

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from template_manager.constants import FALLBACK_CATEGORY


class TokenizeStrategy(str, Enum):
    """How a bare filename is split into display words."""

    CAMEL_SPLIT = "camel_split"  # space before capitals, capitalize first char
    TITLE_WORDS = "title_words"  # split on capitals/-/., capitalize every word


class PhraseReplacement(BaseModel):
    """A literal phrase rewrite applied after tokenization."""

    model_config = ConfigDict(frozen=True)
    old: str = Field(min_length=1)
    new: str


class NamingRules(BaseModel):
    """Declarative naming rules for one source group.

    Overrides are keyed by the raw filename and win over every other rule.
    Replacements run in order, each on its first occurrence only.
    """

    model_config = ConfigDict(frozen=True)
    strategy: TokenizeStrategy = Field(default=TokenizeStrategy.CAMEL_SPLIT)
    extension_pattern: str = Field(
        default=r"\.html$",
        description="Regex removed from the filename before tokenizing",
    )
    replacements: tuple[PhraseReplacement, ...] = Field(default=())
    overrides: dict[str, str] = Field(default_factory=dict)
    strip_fragments: tuple[str, ...] = Field(
        default=(),
        description="Leftover fragments removed after tokenizing, e.g. 'Md'",
    )


# Filename characters that can't appear verbatim in an entry id
_ID_ESCAPED = re.compile(r"[%\-]|[^\S ]")


def _percent_encode(match: re.Match) -> str:
    return "".join(f"%{b:02X}" for b in match.group().encode("utf-8"))


def id_slug(filename: str) -> str:
    """Encode ``filename`` for use in an entry id.

    Spaces become ``-``. Literal ``-``, ``%`` and other whitespace are
    percent-encoded, so distinct filenames always give distinct slugs:
    ``"a b.html"`` -> ``a-b.html`` but ``"a-b.html"`` -> ``a%2Db.html``.
    """
    return _ID_ESCAPED.sub(_percent_encode, filename).replace(" ", "-")


class ManifestFile(BaseModel):
    """One file of a source group.

    ``owner`` and ``content_path`` fall back to the group's values when unset.
    """

    model_config = ConfigDict(frozen=True)
    filename: str = Field(min_length=1)
    owner: str | None = None
    content_path: str | None = None


class SourceGroup(BaseModel):
    """A named collection of manifest files.

    An empty ``directory`` marks the root group: files that live next to the
    manifest and belong to no named collection. ``files`` accepts bare
    filenames or ManifestFile values.
    """

    model_config = ConfigDict(frozen=True)
    id: str = Field(min_length=1, description="Prefix for entry ids, e.g. 'digital-india'")
    label: str = Field(default="", description="Category label shown for the group's entries")
    directory: str = Field(default="", description="Content path prefix, empty for root files")
    owner: str | None = Field(default=None, description="Default owner of the group's files")
    naming: NamingRules = Field(default_factory=NamingRules)
    files: tuple[ManifestFile, ...] = Field(default=())

    @field_validator("files", mode="before")
    @classmethod
    def coerce_filenames(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return tuple({"filename": f} if isinstance(f, str) else f for f in value)
        return value

    @model_validator(mode="after")
    def check_unique_filenames(self) -> SourceGroup:
        seen: set[str] = set()
        for name in self.filenames:
            if name in seen:
                raise ValueError(f"Duplicate file in group {self.id}: {name}")
            seen.add(name)
        return self

    @property
    def filenames(self) -> tuple[str, ...]:
        return tuple(f.filename for f in self.files)

    @property
    def is_root(self) -> bool:
        return not self.directory

    @property
    def category(self) -> str:
        return self.label or FALLBACK_CATEGORY

    def content_path(self, filename: str) -> str:
        if self.is_root:
            return filename
        return f"{self.directory.rstrip('/')}/{filename}"

    def entry_id(self, filename: str) -> str:
        return f"{self.id}-{id_slug(filename)}"

    def rows(self) -> Iterator[ManifestRow]:
        for item in self.files:
            yield ManifestRow(
                group=self,
                filename=item.filename,
                owner=item.owner or self.owner,
                content_path=item.content_path or self.content_path(item.filename),
            )


class ManifestRow(BaseModel):
    """One manifest row. ``owner`` is None for rows without ownership tagging."""

    model_config = ConfigDict(frozen=True)
    group: SourceGroup
    filename: str = Field(min_length=1)
    owner: str | None = None
    content_path: str = Field(min_length=1)

    @property
    def entry_id(self) -> str:
        return self.group.entry_id(self.filename)


class Manifest(BaseModel):
    """Static, ordered list of source groups."""

    model_config = ConfigDict(frozen=True)
    groups: tuple[SourceGroup, ...] = Field(default=())

    @model_validator(mode="after")
    def check_group_ids(self) -> Manifest:
        # Entry ids are "<group id>-<slug>", so a group id must not extend
        # another one with "-" or the two groups' ids could collide.
        ids = [g.id for g in self.groups]
        for i, a in enumerate(ids):
            for b in ids[i + 1 :]:
                if a == b:
                    raise ValueError(f"Duplicate group id: {a}")
                if b.startswith(f"{a}-") or a.startswith(f"{b}-"):
                    raise ValueError(f"Group ids overlap: {a!r} and {b!r}")
        return self

    def rows(self) -> Iterator[ManifestRow]:
        """Yield rows in group order, then file order within each group."""
        for group in self.groups:
            yield from group.rows()

    def __len__(self) -> int:
        return sum(len(g.files) for g in self.groups)


class TemplateEntry(BaseModel):
    """A loaded template. Immutable once created."""

    model_config = ConfigDict(frozen=True)
    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    category: str
    content: str
    owner: str = Field(min_length=1)


class Query(BaseModel):
    """Owner plus optional free-text search term."""

    model_config = ConfigDict(frozen=True)
    owner: str
    search_term: str = ""

    @property
    def has_search(self) -> bool:
        return bool(self.search_term and self.search_term.strip())
