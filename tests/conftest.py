"""Shared fixtures for locale dating tests."""

from __future__ import annotations

from typing import Iterator

import pytest

from app.LocaleDating import DictFormatCatalog, ZoneContext, zone_context
from app.Localization.Translator import current_locale

CENTRAL = 'Central Time (US & Canada)'
MOUNTAIN = 'Mountain Time (US & Canada)'


@pytest.fixture(autouse=True)
def central_zone() -> Iterator[None]:
    """Every test starts in US Central time and English, and restores both."""
    locale_token = current_locale.set('en')
    previous = zone_context.set_zone(CENTRAL)
    try:
        yield
    finally:
        zone_context.set_zone(previous)
        current_locale.reset(locale_token)


@pytest.fixture
def zones() -> ZoneContext:
    """A private zone context so tests can switch zones freely."""
    return ZoneContext(CENTRAL)


@pytest.fixture
def catalog() -> DictFormatCatalog:
    """Static catalog with the US patterns."""
    return DictFormatCatalog({
        'date': {
            'default': '%m/%d/%Y',
            'ymd': '%Y-%m-%d',
        },
        'time': {
            'default': '%m/%d/%Y %I:%M%P',
            'short': '%I:%M%P',
        },
        'datetime': {
            'default': '%m/%d/%Y %I:%M%P',
            'long': '%m/%d/%Y %I:%M%P',
        },
    })
