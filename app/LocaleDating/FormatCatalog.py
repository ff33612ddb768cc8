from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Optional, Protocol, Sequence, Tuple, Union

from app.Localization.Translator import Translator, translator as default_translator
from .Exceptions import MissingFormatError


class Category(str, Enum):
    """Kind of value a locale accessor converts."""
    DATE = 'date'
    TIME = 'time'
    DATETIME = 'datetime'


CategoryLike = Union[Category, str]

# Catalog keys holding the localized names, read from the date and time namespaces
NAME_KEYS = {
    'month_names': 'date.month_names',
    'abbr_month_names': 'date.abbr_month_names',
    'day_names': 'date.day_names',
    'abbr_day_names': 'date.abbr_day_names',
    'am': 'time.am',
    'pm': 'time.pm',
}


def _name_list(value: Any, size: int) -> Optional[Tuple[str, ...]]:
    # Month lists may carry a leading null so that index 1 is January
    if not isinstance(value, list):
        return None
    if len(value) == size + 1 and value[0] is None:
        value = value[1:]
    if len(value) != size or not all(isinstance(name, str) and name for name in value):
        return None
    return tuple(value)


@dataclass(frozen=True)
class LocaleNames:
    """
    Month, weekday and meridian names of one locale.

    Months start with January, weekdays with Sunday. These replace the
    ``%B %b %h %A %a %p %P`` directives, which strftime would otherwise fill
    from the process locale.
    """

    month_names: Tuple[str, ...]
    abbr_month_names: Tuple[str, ...]
    day_names: Tuple[str, ...]
    abbr_day_names: Tuple[str, ...]
    am: str = 'am'
    pm: str = 'pm'

    @classmethod
    def from_lines(cls, lines: Dict[str, Any]) -> Optional['LocaleNames']:
        """Build names from catalog values; None when any of them is missing or malformed."""
        months = _name_list(lines.get('month_names'), 12)
        abbr_months = _name_list(lines.get('abbr_month_names'), 12)
        days = _name_list(lines.get('day_names'), 7)
        abbr_days = _name_list(lines.get('abbr_day_names'), 7)
        am, pm = lines.get('am'), lines.get('pm')

        if months is None or abbr_months is None or days is None or abbr_days is None:
            return None
        if not (isinstance(am, str) and am and isinstance(pm, str) and pm):
            return None
        return cls(months, abbr_months, days, abbr_days, am, pm)

    def words(self, directive: str) -> Sequence[str]:
        """Every name a directive can produce, in directive order."""
        if directive == 'B':
            return self.month_names
        if directive in ('b', 'h'):
            return self.abbr_month_names
        if directive == 'A':
            return self.day_names
        if directive == 'a':
            return self.abbr_day_names
        if directive in ('p', 'P'):
            return (self.am, self.pm)
        raise KeyError(directive)

    def name_for(self, directive: str, value: Union[date, datetime]) -> str:
        """The localized name ``directive`` stands for in ``value``."""
        if directive in ('B', 'b', 'h'):
            return self.words(directive)[value.month - 1]
        if directive in ('A', 'a'):
            return self.words(directive)[(value.weekday() + 1) % 7]

        hour = value.hour if isinstance(value, datetime) else 0
        meridian = self.am if hour < 12 else self.pm
        return meridian.upper() if directive == 'p' else meridian.lower()


class FormatCatalogInterface(Protocol):
    """Interface for anything that hands out locale patterns."""

    def lookup_pattern(self, category: CategoryLike, format_key: str) -> str:
        """Return the strftime pattern for (category, format_key)."""
        ...

    def lookup_names(self) -> Optional[LocaleNames]:
        """Return the localized names, or None to use the process locale."""
        ...


class TranslatorFormatCatalog(FormatCatalogInterface):
    """
    Catalog backed by the translator's language files.

    Patterns live under ``<category>.formats.<format_key>``, so the ``date``
    namespace file of each locale carries a ``formats`` mapping. Lookups are
    never cached here; lines added to the translator at runtime are seen by
    the next conversion.
    """

    def __init__(self, translator: Optional[Translator] = None, locale: Optional[str] = None) -> None:
        self._translator = translator
        self.locale = locale

    @property
    def translator(self) -> Translator:
        return self._translator or default_translator

    def lookup_pattern(self, category: CategoryLike, format_key: str) -> str:
        category = Category(category)
        key = f"{category.value}.formats.{format_key}"
        pattern = self.translator.get(key, locale=self.locale)

        if pattern is None:
            raise MissingFormatError(
                category.value, str(format_key),
                self.locale or self.translator.get_current_locale()
            )
        return pattern

    def define(self, category: CategoryLike, format_key: str, pattern: str, locale: Optional[str] = None) -> None:
        """Add or replace a single pattern for a locale."""
        category = Category(category)
        target_locale = locale or self.locale or self.translator.get_current_locale()
        self.translator.add_lines({'formats': {format_key: pattern}}, target_locale, namespace=category.value)

    def lookup_names(self) -> Optional[LocaleNames]:
        """
        Month, weekday and meridian names of the catalog's locale.

        Each name list falls back to the fallback locale on its own, so a
        locale may translate months but keep the fallback am/pm.
        """
        lines = {
            field: self.translator.get_lines(key, locale=self.locale)
            for field, key in NAME_KEYS.items()
        }
        return LocaleNames.from_lines(lines)


class DictFormatCatalog(FormatCatalogInterface):
    """In-memory catalog, handy for static configuration and tests."""

    def __init__(
        self,
        patterns: Optional[Dict[CategoryLike, Dict[str, str]]] = None,
        names: Optional[LocaleNames] = None
    ) -> None:
        self.names = names
        self._patterns: Dict[Category, Dict[str, str]] = {category: {} for category in Category}
        for category, formats in (patterns or {}).items():
            self._patterns[Category(category)].update(formats)

    def lookup_pattern(self, category: CategoryLike, format_key: str) -> str:
        category = Category(category)
        try:
            return self._patterns[category][format_key]
        except KeyError:
            raise MissingFormatError(category.value, str(format_key)) from None

    def lookup_names(self) -> Optional[LocaleNames]:
        return self.names

    def define(self, category: CategoryLike, format_key: str, pattern: str) -> None:
        self._patterns[Category(category)][format_key] = pattern


# Global catalog reading the application's language files
format_catalog = TranslatorFormatCatalog()
