from __future__ import annotations

"""
Localization Configuration for locale dating
"""
import os
from pathlib import Path
from typing import Dict, Any, cast

# Repository-level language files (resources/lang/<locale>/<category>.json)
DEFAULT_LANG_PATH = str(Path(__file__).resolve().parent.parent / 'resources' / 'lang')

LOCALIZATION_CONFIG: Dict[str, Any] = {
    # Default locale
    'locale': os.getenv('APP_LOCALE', 'en'),

    # Fallback locale when a format is missing in the current locale
    'fallback_locale': os.getenv('APP_FALLBACK_LOCALE', 'en'),

    # Path to language files
    'lang_path': os.getenv('LANG_PATH', DEFAULT_LANG_PATH),

    # Process-wide zone used for time and datetime conversions
    'timezone': os.getenv('APP_TIMEZONE', 'UTC'),

    # Accessor naming defaults
    'dating': {
        'default_format': 'default',
        'default_ending': 'as_text',
        'setter_prefix': 'set_',
    },

    # Rails-style zone names mapped onto IANA identifiers
    'zone_aliases': {
        'Hawaii': 'Pacific/Honolulu',
        'Alaska': 'America/Juneau',
        'Pacific Time (US & Canada)': 'America/Los_Angeles',
        'Arizona': 'America/Phoenix',
        'Mountain Time (US & Canada)': 'America/Denver',
        'Central Time (US & Canada)': 'America/Chicago',
        'Eastern Time (US & Canada)': 'America/New_York',
        'Atlantic Time (Canada)': 'America/Halifax',
        'London': 'Europe/London',
        'Berlin': 'Europe/Berlin',
        'Paris': 'Europe/Paris',
        'Tokyo': 'Asia/Tokyo',
        'Sydney': 'Australia/Sydney',
        'UTC': 'UTC',
    },
}


def get_localization_config() -> Dict[str, Any]:
    """Get localization configuration"""
    return LOCALIZATION_CONFIG.copy()

def get_default_locale() -> str:
    """Get default locale"""
    return cast(str, LOCALIZATION_CONFIG['locale'])

def get_fallback_locale() -> str:
    """Get fallback locale"""
    return cast(str, LOCALIZATION_CONFIG['fallback_locale'])

def get_lang_path() -> str:
    """Get path to language files"""
    return cast(str, LOCALIZATION_CONFIG['lang_path'])

def get_default_timezone() -> str:
    """Get the zone the process starts in"""
    return cast(str, LOCALIZATION_CONFIG['timezone'])

def get_default_format() -> str:
    """Get the format key used when none is given"""
    return cast(str, LOCALIZATION_CONFIG['dating']['default_format'])

def get_default_ending() -> str:
    """Get the accessor ending used with the default format"""
    return cast(str, LOCALIZATION_CONFIG['dating']['default_ending'])

def get_setter_prefix() -> str:
    """Get the prefix of generated setter methods"""
    return cast(str, LOCALIZATION_CONFIG['dating']['setter_prefix'])

def get_zone_aliases() -> Dict[str, str]:
    """Get display-name to IANA zone mapping"""
    return cast(Dict[str, str], LOCALIZATION_CONFIG['zone_aliases']).copy()
