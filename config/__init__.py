from .localization import (
    get_localization_config,
    get_default_locale,
    get_fallback_locale,
    get_lang_path,
    get_default_timezone,
    get_default_format,
    get_default_ending,
    get_setter_prefix,
    get_zone_aliases,
)

__all__ = [
    "get_localization_config", "get_default_locale", "get_fallback_locale",
    "get_lang_path", "get_default_timezone", "get_default_format",
    "get_default_ending", "get_setter_prefix", "get_zone_aliases",
]
