"""
Laravel-style translation catalog used for locale date patterns
"""
from __future__ import annotations

import json
import logging
import threading
from typing import Dict, Any, Optional, List, Union
from pathlib import Path
from contextvars import ContextVar

import yaml

from config.localization import get_default_locale, get_fallback_locale, get_lang_path


class TranslationError(Exception):
    """Custom exception for translation errors"""
    pass


class Translator:
    """Laravel-style translator holding namespaced lines per locale"""

    def __init__(self, lang_path: Optional[Union[str, Path]] = None, fallback_locale: Optional[str] = None):
        self.lang_path = Path(lang_path or get_lang_path())
        self.fallback_locale = fallback_locale or get_fallback_locale()
        self._translations: Dict[str, Dict[str, Any]] = {}
        self._loaded_locales: set = set()
        self._lock = threading.RLock()
        self.logger = logging.getLogger(f"{__name__}.Translator")

        # Load fallback locale by default
        self._load_locale(self.fallback_locale)

    def get(self, key: str, locale: Optional[str] = None, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a translated line by key

        Args:
            key: Translation key in dot notation (e.g., 'date.formats.default')
            locale: Target locale (uses current locale if None)
            fallback: Value returned when neither locale defines the key
        """
        translation = self.get_lines(key, locale)

        if translation is None or not isinstance(translation, str):
            return fallback

        return translation

    def get_lines(self, key: str, locale: Optional[str] = None) -> Optional[Any]:
        """
        Get the raw value stored under a key: a line, a list or a nested mapping

        Falls back to the fallback locale when the target locale lacks the key.
        """
        current_locale = locale or self.get_current_locale()

        # Ensure locale is loaded
        if current_locale not in self._loaded_locales:
            self._load_locale(current_locale)

        translation = self._get_translation(key, current_locale)

        # Fallback to default locale if not found
        if translation is None and current_locale != self.fallback_locale:
            translation = self._get_translation(key, self.fallback_locale)

        return translation

    def has(self, key: str, locale: Optional[str] = None) -> bool:
        """Check if translation key exists"""
        current_locale = locale or self.get_current_locale()

        if current_locale not in self._loaded_locales:
            self._load_locale(current_locale)

        return self._get_translation(key, current_locale) is not None

    def add_lines(self, lines: Dict[str, Any], locale: str, namespace: str = "messages") -> None:
        """Add translation lines to a specific namespace"""
        with self._lock:
            if locale not in self._loaded_locales:
                self._load_locale(locale)

            namespaces = self._translations.setdefault(locale, {})
            self._merge(namespaces.setdefault(namespace, {}), lines)

    def forget(self, locale: Optional[str] = None) -> None:
        """Drop loaded lines so the next lookup reads the files again"""
        with self._lock:
            if locale is None:
                self._translations.clear()
                self._loaded_locales.clear()
            else:
                self._translations.pop(locale, None)
                self._loaded_locales.discard(locale)

    def get_available_locales(self) -> List[str]:
        """Get list of available locales"""
        locales = []

        if self.lang_path.exists():
            for item in self.lang_path.iterdir():
                if item.is_dir() and not item.name.startswith('.'):
                    locales.append(item.name)

        return sorted(locales)

    def _load_locale(self, locale: str) -> None:
        """Load all translation files for a locale"""
        with self._lock:
            # Another thread may have finished loading while we waited
            if locale in self._loaded_locales:
                return

            namespaces = self._translations.setdefault(locale, {})
            locale_path = self.lang_path / locale

            if not locale_path.is_dir():
                self.logger.debug(f"No language directory for locale {locale} under {self.lang_path}")
            else:
                for file_path in sorted(locale_path.iterdir()):
                    if file_path.suffix.lower() not in ('.json', '.yml', '.yaml'):
                        continue

                    try:
                        translations = self._read_file(file_path)
                    except TranslationError as e:
                        self.logger.warning(str(e))
                        continue

                    self._merge(namespaces.setdefault(file_path.stem, {}), translations)

            # Only visible as loaded once every file has been merged
            self._loaded_locales.add(locale)

    def _read_file(self, file_path: Path) -> Dict[str, Any]:
        """Read a JSON or YAML namespace file"""
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                if file_path.suffix.lower() == '.json':
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError, IOError) as e:
            raise TranslationError(f"Error loading translation file {file_path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise TranslationError(f"Translation file {file_path} must contain a mapping")
        return data

    def _get_translation(self, key: str, locale: str) -> Optional[Any]:
        """Get translation from loaded translations"""
        if locale not in self._translations:
            return None

        # Parse dot notation key
        parts = key.split('.')

        if len(parts) < 2:
            return None

        namespace = parts[0]
        key_path = parts[1:]

        if namespace not in self._translations[locale]:
            return None

        # Navigate through nested dictionary
        current = self._translations[locale][namespace]

        for part in key_path:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return None

        return current if isinstance(current, (str, dict, list)) else None

    @staticmethod
    def _merge(target: Dict[str, Any], lines: Dict[str, Any]) -> None:
        for key, value in lines.items():
            if isinstance(value, dict) and isinstance(target.get(key), dict):
                Translator._merge(target[key], value)
            else:
                target[key] = value

    def get_current_locale(self) -> str:
        """Get current locale from context"""
        return current_locale.get()

    def set_locale(self, locale: str) -> None:
        """Set current locale"""
        current_locale.set(locale)


# Context variable for current locale
current_locale: ContextVar[str] = ContextVar('current_locale', default=get_default_locale())

# Global translator instance
translator = Translator()


def app_locale() -> str:
    """Get current application locale"""
    return translator.get_current_locale()


def set_app_locale(locale: str) -> None:
    """Set current application locale"""
    translator.set_locale(locale)
