"""
Locale dating module.

Adds paired text accessors for date, time and datetime attributes so that a
locale formatted string can be read from and written into the typed value.

Classes:
- LocaleDating: Mixin providing locale_date / locale_time / locale_datetime
- FormatOptions: Declaration options (format, ending, name)
- DateCodec, TimeCodec, DateTimeCodec: Per-category text conversion
- ZoneContext: Process-wide current zone
- TranslatorFormatCatalog, DictFormatCatalog: Pattern and name lookup
- LocaleNames: Month, weekday and am/pm names of a locale

Examples:
    class Person(BaseModel):
        born_on: Mapped[Optional[date]] = mapped_column(Date)

    Person.locale_date('born_on')
    # creates property "born_on_as_text" and method "set_born_on_as_text"

    Person.locale_date('born_on', format='ymd', ending='text')
    # creates "born_on_text" / "set_born_on_text" using the 'ymd' format
"""

from .Exceptions import (
    LocaleDatingError,
    InvalidOptionsError,
    MethodOverwriteError,
    MissingFormatError,
    ParseError,
    UnknownZoneError
)

from .FormatCatalog import (
    Category,
    FormatCatalogInterface,
    TranslatorFormatCatalog,
    DictFormatCatalog,
    LocaleNames,
    format_catalog
)

from .TimeZone import (
    ZoneContext,
    ZoneConverter,
    resolve_zone,
    zone_context,
    get_zone,
    set_zone
)

from .Codecs import (
    LocaleCodec,
    DateCodec,
    TimeCodec,
    DateTimeCodec,
    codec_for
)

from .Naming import (
    AccessorNames,
    FormatOptions,
    resolve_accessor_names,
    check_naming_options
)

from .Guard import ensure_no_overwrite

from .Registrar import (
    AttributeBinding,
    LocaleDating,
    register,
    bindings_for,
    locale_date,
    locale_time,
    locale_datetime
)

__all__ = [
    # Errors
    'LocaleDatingError',
    'InvalidOptionsError',
    'MethodOverwriteError',
    'MissingFormatError',
    'ParseError',
    'UnknownZoneError',

    # Catalog
    'Category',
    'FormatCatalogInterface',
    'TranslatorFormatCatalog',
    'DictFormatCatalog',
    'LocaleNames',
    'format_catalog',

    # Zones
    'ZoneContext',
    'ZoneConverter',
    'resolve_zone',
    'zone_context',
    'get_zone',
    'set_zone',

    # Codecs
    'LocaleCodec',
    'DateCodec',
    'TimeCodec',
    'DateTimeCodec',
    'codec_for',

    # Naming and guard
    'AccessorNames',
    'FormatOptions',
    'resolve_accessor_names',
    'check_naming_options',
    'ensure_no_overwrite',

    # Registration
    'AttributeBinding',
    'LocaleDating',
    'register',
    'bindings_for',
    'locale_date',
    'locale_time',
    'locale_datetime'
]
