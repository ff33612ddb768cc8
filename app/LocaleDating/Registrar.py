from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Tuple, TypeVar, Union

from .Codecs import LocaleCodec, codec_for
from .FormatCatalog import Category, CategoryLike, FormatCatalogInterface
from .Guard import ensure_no_overwrite
from .Naming import FormatOptions, check_naming_options, resolve_accessor_names
from .TimeZone import ZoneContext

T = TypeVar('T', bound=type)

BINDINGS_ATTRIBUTE = '__locale_dating_bindings__'

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttributeBinding:
    """One generated accessor pair and the attribute it wraps."""
    target: type
    attribute: str
    category: Category
    format: str
    getter_name: str
    setter_name: str


def read_attribute(instance: Any, name: str) -> Any:
    """Read the underlying value, through the model's get_attribute when it has one."""
    getter = getattr(instance, 'get_attribute', None)
    if callable(getter):
        return getter(name)
    return getattr(instance, name)


def write_attribute(instance: Any, name: str, value: Any) -> None:
    """Write the underlying value, through the model's set_attribute when it has one."""
    setter = getattr(instance, 'set_attribute', None)
    if callable(setter):
        setter(name, value)
    else:
        setattr(instance, name, value)


def register(
    target: type,
    category: CategoryLike,
    attributes: Union[str, Iterable[str]],
    options: Optional[FormatOptions] = None,
    *,
    catalog: Optional[FormatCatalogInterface] = None,
    zones: Optional[ZoneContext] = None
) -> None:
    """
    Bind locale text accessors for each attribute onto ``target``.

    For ``born_on`` with default options this adds a read/write property
    ``born_on_as_text`` and a method ``set_born_on_as_text(text)``.

    The options are validated before any attribute is touched. Attributes
    are then bound one at a time, so when a later attribute collides with an
    existing member the earlier ones of the same call stay bound.
    """
    category = Category(category)
    options = options or FormatOptions()
    if isinstance(attributes, str):
        attributes = [attributes]
    names = [str(attribute) for attribute in attributes]

    check_naming_options(names, options)

    for attribute in names:
        getter_name, setter_name = resolve_accessor_names(attribute, options, len(names))
        ensure_no_overwrite(target, attribute, (getter_name, setter_name))

        binding = AttributeBinding(
            target=target,
            attribute=attribute,
            category=category,
            format=options.format,
            getter_name=getter_name,
            setter_name=setter_name,
        )
        _attach(binding, codec_for(category, options.format, catalog, zones))


def _attach(binding: AttributeBinding, codec: LocaleCodec) -> None:
    target = binding.target
    attribute = binding.attribute

    def getter(self: Any) -> Optional[str]:
        return codec.encode(read_attribute(self, attribute))

    def setter(self: Any, text: Optional[str]) -> None:
        write_attribute(self, attribute, codec.decode(text))

    getter.__name__ = binding.getter_name
    getter.__qualname__ = f"{target.__qualname__}.{binding.getter_name}"
    setter.__name__ = binding.setter_name
    setter.__qualname__ = f"{target.__qualname__}.{binding.setter_name}"
    setter.__doc__ = f"Parse {binding.category.value} text into '{attribute}'."

    doc = f"'{attribute}' as {binding.category.value} text using the '{binding.format}' format."
    setattr(target, binding.getter_name, property(getter, setter, doc=doc))
    setattr(target, binding.setter_name, setter)

    own = vars(target).get(BINDINGS_ATTRIBUTE, ())
    setattr(target, BINDINGS_ATTRIBUTE, own + (binding,))

    logger.debug(
        f"Bound {binding.category.value} accessors {binding.getter_name}/{binding.setter_name} "
        f"for {target.__name__}.{attribute}"
    )


def bindings_for(target: type) -> Tuple[AttributeBinding, ...]:
    """All bindings of ``target`` and its bases, base classes first."""
    result: Tuple[AttributeBinding, ...] = ()
    for klass in reversed(target.__mro__):
        result += vars(klass).get(BINDINGS_ATTRIBUTE, ())
    return result


def _declare(category: Category, target: type, attributes: Tuple[str, ...], options: dict) -> None:
    catalog = options.pop('catalog', None)
    zones = options.pop('zones', None)
    register(
        target, category, attributes, FormatOptions.from_kwargs(**options),
        catalog=catalog, zones=zones
    )


class LocaleDating:
    """
    Mixin giving a class the locale_date / locale_time / locale_datetime
    declarations.

    Usage:
        class Person(BaseModel):
            born_on: Mapped[Optional[date]] = mapped_column(Date)

        Person.locale_date('born_on')
        Person.locale_date('born_on', format='ymd', ending='ymd_text')
    """

    @classmethod
    def locale_date(cls, *attributes: str, **options: Any) -> None:
        """Wrap date attributes; see FormatOptions for the keywords."""
        _declare(Category.DATE, cls, attributes, options)

    @classmethod
    def locale_time(cls, *attributes: str, **options: Any) -> None:
        """Wrap time-of-day attributes stored as instants."""
        _declare(Category.TIME, cls, attributes, options)

    @classmethod
    def locale_datetime(cls, *attributes: str, **options: Any) -> None:
        """Wrap datetime attributes stored as instants."""
        _declare(Category.DATETIME, cls, attributes, options)

    @classmethod
    def locale_dating_bindings(cls) -> Tuple[AttributeBinding, ...]:
        return bindings_for(cls)


# Class decorators for classes that do not mix in LocaleDating

def _decorator(category: Category, attributes: Tuple[str, ...], options: dict) -> Callable[[T], T]:
    def decorate(cls: T) -> T:
        _declare(category, cls, attributes, dict(options))
        return cls
    return decorate


def locale_date(*attributes: str, **options: Any) -> Callable[[T], T]:
    return _decorator(Category.DATE, attributes, options)


def locale_time(*attributes: str, **options: Any) -> Callable[[T], T]:
    return _decorator(Category.TIME, attributes, options)


def locale_datetime(*attributes: str, **options: Any) -> Callable[[T], T]:
    return _decorator(Category.DATETIME, attributes, options)
