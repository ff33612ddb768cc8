from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, NamedTuple, Optional, Sequence

from config.localization import get_default_ending, get_default_format, get_setter_prefix
from .Exceptions import InvalidOptionsError


class AccessorNames(NamedTuple):
    getter: str
    setter: str


@dataclass(frozen=True)
class FormatOptions:
    """
    Options shared by every attribute in one declaration.

    @param format: Catalog format key used for display and parsing
    @param ending: Suffix of the generated accessor, e.g. ``as_text``
    @param name: Explicit accessor name; overrides ``ending``
    """

    format: str = field(default_factory=get_default_format)
    ending: Optional[str] = None
    name: Optional[str] = None

    @classmethod
    def from_kwargs(cls, **options: Any) -> 'FormatOptions':
        """Build options from declaration keywords, rejecting unknown ones."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise InvalidOptionsError(
                f"Unknown locale_dating option(s) {', '.join(unknown)}; "
                f"allowed options are {', '.join(sorted(known))}"
            )

        values = {key: str(value) for key, value in options.items() if value is not None}
        return cls(**values)

    @property
    def resolved_ending(self) -> str:
        return resolve_ending(self)


def resolve_ending(options: FormatOptions) -> str:
    """Ending for the default accessor name."""
    if options.ending:
        return options.ending
    if options.format == get_default_format():
        return get_default_ending()
    return f"as_{options.format}"


def setter_name_for(getter_name: str) -> str:
    return f"{get_setter_prefix()}{getter_name}"


def check_naming_options(attributes: Sequence[str], options: FormatOptions) -> None:
    """Validate a whole declaration before any attribute is processed."""
    if not attributes:
        raise InvalidOptionsError("locale_dating needs at least one attribute name")

    if options.name and len(attributes) > 1:
        raise InvalidOptionsError(
            "multiple attributes cannot be wrapped with an explicitly named method",
            list(attributes)
        )


def resolve_accessor_names(attribute: str, options: FormatOptions, count: int = 1) -> AccessorNames:
    """
    Compute the getter and setter names for one attribute.

    @param attribute: Underlying attribute name
    @param options: Declaration options
    @param count: Number of attributes in the same declaration
    @return: AccessorNames(getter, setter)
    """
    if options.name and count > 1:
        raise InvalidOptionsError(
            "multiple attributes cannot be wrapped with an explicitly named method",
            [attribute]
        )

    getter_name = options.name or f"{attribute}_{resolve_ending(options)}"
    if not getter_name.isidentifier():
        raise InvalidOptionsError(
            f"'{getter_name}' is not a valid accessor name for attribute '{attribute}'",
            [attribute]
        )

    return AccessorNames(getter_name, setter_name_for(getter_name))
