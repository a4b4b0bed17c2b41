"""Shared fixtures for template-manager tests."""

from __future__ import annotations

import pytest

from template_manager.catalog.models import Manifest, NamingRules, SourceGroup, TemplateEntry
from template_manager.catalog.sources import MappingContentSource
from template_manager.config.settings import clear_settings_cache
from template_manager.exceptions import FetchError


@pytest.fixture
def clear_settings():
    """Clear the settings cache before and after each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def group_a() -> SourceGroup:
    return SourceGroup(
        id="group-a",
        label="group a",
        directory="group a",
        owner="alice",
        files=("card.html", "cardContainer.html"),
    )


@pytest.fixture
def group_b() -> SourceGroup:
    return SourceGroup(
        id="group-b",
        label="group b",
        directory="group b",
        owner="bob",
        naming=NamingRules(overrides={"card.html": "Special Card"}),
        files=("hero.html",),
    )


@pytest.fixture
def scenario_manifest(group_a: SourceGroup, group_b: SourceGroup) -> Manifest:
    return Manifest(groups=(group_a, group_b))


@pytest.fixture
def scenario_source() -> MappingContentSource:
    """card.html loads, cardContainer.html fails, hero.html loads."""
    return MappingContentSource(
        {
            "group a/card.html": "<div class='card'>Card</div>",
            "group a/cardContainer.html": FetchError("group a/cardContainer.html", "HTTP error! status: 404"),
            "group b/hero.html": "<section>Hero banner</section>",
        }
    )


@pytest.fixture
def sample_entries() -> list[TemplateEntry]:
    return [
        TemplateEntry(
            id="digital-india-hero.html",
            name="Hero Banner",
            category="digital india",
            content="click here",
            owner="sameer",
        ),
        TemplateEntry(
            id="hiroshima-card.html",
            name="card master minds",
            category="hiroshima",
            content="<div class='card'>minds</div>",
            owner="sameer",
        ),
        TemplateEntry(
            id="hiroshima-story.html",
            name="Story",
            category="hiroshima",
            content="<article>Once upon a time</article>",
            owner="sameer",
        ),
        TemplateEntry(
            id="utk-card.html",
            name="Card",
            category="utk templates",
            content="<div>utk card</div>",
            owner="utk",
        ),
    ]
