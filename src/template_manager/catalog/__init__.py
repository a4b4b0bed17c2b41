"""Template catalog: manifest loading, name derivation and querying."""

__all__ = [
    # models
    "TemplateEntry", "ManifestRow", "ManifestFile", "SourceGroup", "Manifest", "Query",
    "NamingRules", "PhraseReplacement", "TokenizeStrategy", "id_slug",
    # naming
    "derive_name", "apply_rules", "tokenize",
    # manifest
    "DEFAULT_MANIFEST", "load_manifest", "resolve_manifest",
    # sources
    "ContentSource", "DirectoryContentSource", "HttpContentSource",
    "MappingContentSource", "strip_live_preview",
    # loader
    "load_catalog", "load_catalog_sync", "build_entry", "log_error",
    # catalog
    "Catalog", "filter_entries", "matches_owner", "matches_search",
]
from .models import (
    Manifest,
    ManifestFile,
    ManifestRow,
    NamingRules,
    PhraseReplacement,
    Query,
    SourceGroup,
    TemplateEntry,
    TokenizeStrategy,
    id_slug,
)
from .naming import apply_rules, derive_name, tokenize
from .manifest import DEFAULT_MANIFEST, load_manifest, resolve_manifest
from .sources import (
    ContentSource,
    DirectoryContentSource,
    HttpContentSource,
    MappingContentSource,
    strip_live_preview,
)
from .catalog import Catalog, filter_entries, matches_owner, matches_search
from .loader import build_entry, load_catalog, load_catalog_sync, log_error
