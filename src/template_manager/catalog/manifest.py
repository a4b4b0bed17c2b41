"""Template manifest definitions and loading."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from template_manager.config.logging import get_logger
from template_manager.exceptions import ManifestError

from .models import Manifest, NamingRules, PhraseReplacement, SourceGroup, TokenizeStrategy

logger = get_logger(__name__)

DIGITAL_INDIA = SourceGroup(
    id="digital-india",
    label="digital india",
    directory="digital india",
    owner="sameer",
    naming=NamingRules(overrides={"card.html": "Card Initiatives"}),
    files=(
        "card.html",
        "cardContainer.html",
        "footer.html",
        "hero.html",
        "leaderCard.html",
        "smallCard.html",
    ),
)

HIROSHIMA = SourceGroup(
    id="hiroshima",
    label="hiroshima",
    directory="hiroshima",
    owner="sameer",
    naming=NamingRules(
        replacements=(
            PhraseReplacement(old="Hero Section Img", new="Hero Section with Image"),
            PhraseReplacement(old="Hero Section Full Img", new="Full Hero Section with Image"),
            PhraseReplacement(old="Vid", new="Video"),
            PhraseReplacement(old="Vid Container", new="Video Container"),
        ),
        overrides={
            "card.html": "card master minds",
            "cardContainer.html": "card container masterminds",
        },
    ),
    files=(
        "aboveText.html",
        "animation.html",
        "card.html",
        "cardContainer.html",
        "heroSectionFullImg.html",
        "links.html",
        "simpleFooter.html",
        "story.html",
        "vid.html",
        "vidContainer.html",
    ),
)

ROOT = SourceGroup(
    id="root",
    owner="sameer",
    naming=NamingRules(extension_pattern=r"\.[^/.]+$", strip_fragments=("Md", "Txt")),
    files=("link.txt", "notes.md", "topics.md"),
)

UTK_TEMPLATES = SourceGroup(
    id="utk",
    label="utk templates",
    directory="template/template",
    owner="utk",
    naming=NamingRules(strategy=TokenizeStrategy.TITLE_WORDS),
    files=(
        "animations.html",
        "card.html",
        "footer.html",
        "hero section half image.html",
        "nav with bg image.html",
        "navbar.html",
    ),
)

DEFAULT_MANIFEST = Manifest(groups=(DIGITAL_INDIA, HIROSHIMA, ROOT, UTK_TEMPLATES))


def load_manifest(path: Path) -> Manifest:
    """Load a manifest from a JSON file.

    The file holds ``{"groups": [...]}`` with the same fields as SourceGroup.
    Each ``files`` item is a filename or an object such as
    ``{"filename": "hero.html", "owner": "utk", "content_path": "shared/hero.html"}``.
    Raises:
        ManifestError: If the file is missing, not JSON, or fails validation.
    """
    if not path.exists():
        raise ManifestError(f"Manifest not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ManifestError(f"Invalid JSON in manifest {path}", details=str(e)) from e
    try:
        manifest = Manifest.model_validate(data)
    except ValidationError as e:
        raise ManifestError(f"Invalid manifest {path}", details=str(e)) from e
    logger.debug("Loaded manifest %s with %d groups, %d rows", path, len(manifest.groups), len(manifest))
    return manifest


def resolve_manifest(manifest_path: Path | None = None) -> Manifest:
    """Return the manifest at ``manifest_path``, or the built-in one."""
    if manifest_path is None:
        return DEFAULT_MANIFEST
    return load_manifest(manifest_path)
