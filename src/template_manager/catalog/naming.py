"""Display name derivation for template files.

Names are derived from the raw filename with the owning group's
``NamingRules``: literal overrides first, then extension stripping,
tokenization, phrase replacements and fragment cleanup.
"""

from __future__ import annotations

import re

from template_manager.config.logging import get_logger

from .models import NamingRules, SourceGroup, TokenizeStrategy

logger = get_logger(__name__)

_CAPITAL = re.compile(r"([A-Z])")
_WORD_START = re.compile(r"\b\w")
_WHITESPACE = re.compile(r"\s+")


def strip_extension(filename: str, pattern: str) -> str:
    return re.sub(pattern, "", filename)


def _capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def tokenize(stem: str, strategy: TokenizeStrategy) -> str:
    """Split a bare filename into display words.

    Examples:
        "heroSectionFullImg", CAMEL_SPLIT -> "Hero Section Full Img"
        "nav with bg image", TITLE_WORDS -> "Nav With Bg Image"
    """
    spaced = _CAPITAL.sub(r" \1", stem)
    if strategy is TokenizeStrategy.TITLE_WORDS:
        spaced = spaced.replace("-", " ").replace(".", " ")
        spaced = _WORD_START.sub(lambda m: m.group(0).upper(), spaced)
        return _WHITESPACE.sub(" ", spaced).strip()
    return _capitalize_first(spaced)


def apply_rules(rules: NamingRules, filename: str) -> str:
    """Derive a display name for ``filename`` under ``rules``."""
    if filename in rules.overrides:
        return rules.overrides[filename]
    stem = strip_extension(filename, rules.extension_pattern)
    name = tokenize(stem, rules.strategy)
    for rep in rules.replacements:
        name = name.replace(rep.old, rep.new, 1)
    for fragment in rules.strip_fragments:
        name = name.replace(fragment, "", 1)
    name = name.strip()
    if not name:
        # Degenerate names fall back to the filename, never to an empty string
        logger.debug("Empty derived name for %s, using filename", filename)
        name = stem.strip() or filename
    return name


def derive_name(group: SourceGroup, filename: str) -> str:
    """Derive the display name of ``filename`` within ``group``."""
    return apply_rules(group.naming, filename)
