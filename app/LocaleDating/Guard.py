from __future__ import annotations

from typing import Iterable, Optional

from .Exceptions import MethodOverwriteError


def existing_member(target: type, names: Iterable[str]) -> Optional[str]:
    """Return the first name already defined on ``target`` or its bases."""
    for name in names:
        if hasattr(target, name):
            return name
    return None


def ensure_no_overwrite(target: type, attribute: str, names: Iterable[str]) -> None:
    """
    Refuse to bind accessors whose names are already taken.

    Checked against the class, so inherited methods, properties, mapped
    columns and class attributes all count. Attributes that only ever live in
    an instance ``__dict__`` are not visible here.
    """
    taken = existing_member(target, names)
    if taken is not None:
        raise MethodOverwriteError(attribute, taken)
