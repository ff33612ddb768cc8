from __future__ import annotations

import re
from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Any, ClassVar, Dict, List, Optional, Tuple, Type, Union

import pytz

from .Exceptions import ParseError
from .FormatCatalog import Category, CategoryLike, FormatCatalogInterface, LocaleNames, format_catalog
from .TimeZone import ZoneContext, as_instant, zone_context as default_zone_context

# Any strftime directive, so literal "%%" is consumed before it can pair up
_DIRECTIVE = re.compile(r'%(.)', re.DOTALL)

# Directives that put a calendar date into the text
_DATE_DIRECTIVES = frozenset('bBcdhjmxyY')

# Directives that carry the year
_YEAR_DIRECTIVES = frozenset('cxyYG')

# Directives filled from the locale's names instead of the process locale
_NAMED_DIRECTIVES = frozenset('BbhAapP')

# What a named directive becomes once its name is replaced by a number
_PARSE_DIRECTIVES = {'B': '%m', 'b': '%m', 'h': '%m', 'A': '%w', 'a': '%w', 'p': '%p', 'P': '%p'}


def _meridian(value: Union[date, datetime]) -> str:
    return 'pm' if isinstance(value, datetime) and value.hour >= 12 else 'am'


def format_value(value: Union[date, datetime], pattern: str, names: Optional[LocaleNames] = None) -> str:
    """
    strftime with the locale's month, weekday and am/pm names.

    Without names those directives come from the process locale, except
    ``%P`` (lower-case am/pm), which the platform may lack.
    """
    def localize(match: re.Match[str]) -> str:
        directive = match.group(1)
        if names is not None and directive in _NAMED_DIRECTIVES:
            return names.name_for(directive, value).replace('%', '%%')
        if directive == 'P':
            return _meridian(value)
        return match.group(0)

    return value.strftime(_DIRECTIVE.sub(localize, pattern))


def _literal_regex(literal: str) -> str:
    # strptime lets any run of whitespace match whitespace in the pattern
    return r'\s+'.join(re.escape(chunk) for chunk in re.split(r'\s+', literal))


def _delocalize(text: str, pattern: str, names: LocaleNames) -> Tuple[str, str]:
    """
    Swap localized names in ``text`` for numbers strptime reads in any locale.

    Months become ``%m``, weekdays ``%w`` (Sunday is 0) and am/pm ``%p``.
    Text that does not fit the pattern is returned unchanged for strptime to
    reject.
    """
    pieces: List[str] = []
    named: List[str] = []
    position = 0

    for match in _DIRECTIVE.finditer(pattern):
        pieces.append(_literal_regex(pattern[position:match.start()]))
        directive = match.group(1)
        if directive in _NAMED_DIRECTIVES:
            words = sorted(names.words(directive), key=len, reverse=True)
            pieces.append('(' + '|'.join(re.escape(word) for word in words) + ')')
            named.append(directive)
        elif directive == '%':
            pieces.append('%')
        else:
            pieces.append('.*?')
        position = match.end()
    pieces.append(_literal_regex(pattern[position:]))

    parse_pattern = _DIRECTIVE.sub(lambda m: _PARSE_DIRECTIVES.get(m.group(1), m.group(0)), pattern)
    found = re.fullmatch(''.join(pieces), text, re.IGNORECASE) if named else None
    if found is None:
        return text, parse_pattern

    result = text
    # Replace from the end so earlier spans keep their offsets
    for index in range(len(named), 0, -1):
        directive = named[index - 1]
        word = found.group(index).casefold()
        position = [candidate.casefold() for candidate in names.words(directive)].index(word)

        if directive in ('p', 'P'):
            replacement = 'AM' if position == 0 else 'PM'
        elif directive in ('A', 'a'):
            replacement = str(position)
        else:
            replacement = str(position + 1)
        result = result[:found.start(index)] + replacement + result[found.end(index):]

    return result, parse_pattern


def parse_value(
    text: str,
    pattern: str,
    category: CategoryLike,
    names: Optional[LocaleNames] = None
) -> datetime:
    """strptime reading the locale's names; ``%P`` is read as ``%p`` (case-insensitive)."""
    if names is not None:
        text, parse_pattern = _delocalize(text, pattern, names)
    else:
        parse_pattern = _DIRECTIVE.sub(lambda m: '%p' if m.group(1) == 'P' else m.group(0), pattern)

    try:
        return datetime.strptime(text, parse_pattern)
    except ValueError as e:
        raise ParseError(text, pattern, Category(category).value) from e


def pattern_has_date(pattern: str) -> bool:
    return any(match.group(1) in _DATE_DIRECTIVES for match in _DIRECTIVE.finditer(pattern))


def pattern_has_year(pattern: str) -> bool:
    return any(match.group(1) in _YEAR_DIRECTIVES for match in _DIRECTIVE.finditer(pattern))


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class LocaleCodec(ABC):
    """
    Converts a stored value to locale text and back for one category.

    The pattern is looked up on every call, so the codec follows catalog and
    locale changes made after registration.
    """

    category: ClassVar[Category]

    def __init__(
        self,
        format_key: str = 'default',
        catalog: Optional[FormatCatalogInterface] = None,
        zones: Optional[ZoneContext] = None
    ) -> None:
        self.format_key = format_key
        self.catalog = catalog or format_catalog
        self.zones = zones or default_zone_context

    def pattern(self) -> str:
        return self.catalog.lookup_pattern(self.category, self.format_key)

    def encode(self, value: Any) -> Optional[str]:
        """Format a stored value, passing None through."""
        if value is None:
            return None
        return format_value(self._to_display(value), self.pattern(), self.catalog.lookup_names())

    def decode(self, text: Any) -> Any:
        """Parse text into a storable value; blank text becomes None."""
        if is_blank(text):
            return None
        pattern = self.pattern()
        parsed = parse_value(str(text).strip(), pattern, self.category, self.catalog.lookup_names())

        # strptime puts a date without a year in 1900
        if pattern_has_date(pattern) and not pattern_has_year(pattern):
            parsed = parsed.replace(year=self._current_year())
        return self._from_parsed(parsed, pattern)

    def _current_year(self) -> int:
        return self.zones.today().year

    @abstractmethod
    def _to_display(self, value: Any) -> Union[date, datetime]:
        ...

    @abstractmethod
    def _from_parsed(self, parsed: datetime, pattern: str) -> Any:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(format_key={self.format_key!r})"


class DateCodec(LocaleCodec):
    """Calendar dates. The current zone is never consulted."""

    category = Category.DATE

    def _to_display(self, value: Any) -> date:
        if isinstance(value, datetime):
            return value.date()
        return value

    def _current_year(self) -> int:
        return date.today().year

    def _from_parsed(self, parsed: datetime, pattern: str) -> date:
        return parsed.date()


class TimeCodec(LocaleCodec):
    """
    Times of day stored as UTC instants.

    Text without a date part is placed on today's date in the current zone,
    so decoding the same text on two days gives two different instants.
    """

    category = Category.TIME

    def _to_display(self, value: Any) -> datetime:
        return self.zones.to_local(as_instant(value))

    def _from_parsed(self, parsed: datetime, pattern: str) -> datetime:
        if parsed.tzinfo is not None:
            return parsed.astimezone(pytz.utc)
        if not pattern_has_date(pattern):
            parsed = datetime.combine(self.zones.today(), parsed.time())
        return self.zones.to_instant(parsed)


class DateTimeCodec(LocaleCodec):
    """Points in time stored as UTC instants, shown in the current zone."""

    category = Category.DATETIME

    def _to_display(self, value: Any) -> datetime:
        return self.zones.to_local(as_instant(value))

    def _from_parsed(self, parsed: datetime, pattern: str) -> datetime:
        if parsed.tzinfo is not None:
            return parsed.astimezone(pytz.utc)
        return self.zones.to_instant(parsed)


CODECS: Dict[Category, Type[LocaleCodec]] = {
    Category.DATE: DateCodec,
    Category.TIME: TimeCodec,
    Category.DATETIME: DateTimeCodec,
}


def codec_for(
    category: CategoryLike,
    format_key: str = 'default',
    catalog: Optional[FormatCatalogInterface] = None,
    zones: Optional[ZoneContext] = None
) -> LocaleCodec:
    """Build the codec for a category."""
    return CODECS[Category(category)](format_key, catalog, zones)
