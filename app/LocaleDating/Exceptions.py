from __future__ import annotations

from typing import List, Optional


class LocaleDatingError(Exception):
    """Base exception for locale dating"""
    pass


class InvalidOptionsError(LocaleDatingError, ValueError):
    """Exception raised when a declaration's options cannot be honoured"""

    def __init__(self, message: str, attributes: Optional[List[str]] = None) -> None:
        self.attributes = list(attributes or [])
        super().__init__(message)


class MethodOverwriteError(LocaleDatingError, RuntimeError):
    """Exception raised when a generated accessor would replace an existing member"""

    def __init__(self, attribute: str, method_name: str) -> None:
        self.attribute = attribute
        self.method_name = method_name

        super().__init__(
            f"locale_dating setting would overwrite method '{method_name}' "
            f"for attribute '{attribute}'"
        )


class MissingFormatError(LocaleDatingError, LookupError):
    """Exception raised when the catalog has no pattern for a format key"""

    def __init__(self, category: str, format_key: str, locale: Optional[str] = None) -> None:
        self.category = category
        self.format_key = format_key
        self.locale = locale

        where = f" (locale `{locale}`)" if locale else ""
        super().__init__(
            f"No `{category}` format named `{format_key}` is defined{where}. "
            f"Expected key `{category}.formats.{format_key}`."
        )


class ParseError(LocaleDatingError, ValueError):
    """Exception raised when text does not match the resolved pattern"""

    def __init__(self, text: str, pattern: str, category: str) -> None:
        self.text = text
        self.pattern = pattern
        self.category = category

        super().__init__(
            f"Cannot parse {category} `{text}` with format `{pattern}`"
        )


class UnknownZoneError(LocaleDatingError, ValueError):
    """Exception raised when a zone name cannot be resolved"""

    def __init__(self, zone: str) -> None:
        self.zone = zone

        super().__init__(f"Unknown time zone `{zone}`")
