from __future__ import annotations

from typing import Any, Dict, List, ClassVar
from datetime import datetime, date
from sqlalchemy import func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
import json

from app.LocaleDating import LocaleDating


class Base(DeclarativeBase):
    pass


class BaseModel(Base, LocaleDating):
    """
    Host model for locale dating.

    Subclasses declare columns as usual and then wrap their date/time
    columns:

        class Person(BaseModel):
            __tablename__ = 'people'
            born_on: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

        Person.locale_date('born_on')
    """
    __abstract__ = True

    # Laravel-style hidden/fillable attributes
    __fillable__: ClassVar[List[str]] = []
    __guarded__: ClassVar[List[str]] = ['id', 'created_at', 'updated_at']
    __hidden__: ClassVar[List[str]] = []
    __casts__: ClassVar[Dict[str, str]] = {}
    __appends__: ClassVar[List[str]] = []

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(server_default=func.now(), onupdate=func.now())

    def to_dict(self) -> Dict[str, Any]:
        """Convert model to dictionary, respecting hidden attributes."""
        result = {c.name: getattr(self, c.name) for c in self.__table__.columns}

        for attr in self.__hidden__:
            result.pop(attr, None)

        # Add appended attributes (e.g. generated locale accessors)
        for attr in self.__appends__:
            if hasattr(self, attr):
                result[attr] = getattr(self, attr)

        return result

    def fill(self, attributes: Dict[str, Any]) -> BaseModel:
        """Laravel-style mass assignment with fillable/guarded protection."""
        for key, value in attributes.items():
            if self._is_fillable(key):
                setattr(self, key, value)
        return self

    def _is_fillable(self, key: str) -> bool:
        """Check if attribute is mass assignable."""
        if self.__fillable__:
            return key in self.__fillable__
        return key not in self.__guarded__

    # Laravel-style Attribute Casting
    def get_attribute(self, key: str) -> Any:
        """Get attribute value with casting."""
        value = getattr(self, key, None)

        if key in self.__casts__:
            return self._cast_attribute(value, self.__casts__[key])

        return value

    def _cast_attribute(self, value: Any, cast_type: str) -> Any:
        """Cast attribute to specified type."""
        if value is None:
            return None

        cast_map = {
            'json': lambda v: json.loads(v) if isinstance(v, str) else v,
            'string': lambda v: str(v),
            'date': lambda v: date.fromisoformat(v) if isinstance(v, str) else v,
            'datetime': lambda v: datetime.fromisoformat(v) if isinstance(v, str) else v,
        }

        if cast_type in cast_map:
            return cast_map[cast_type](value)

        return value

    def set_attribute(self, key: str, value: Any) -> None:
        """Set attribute value with casting."""
        if key in self.__casts__:
            value = self._cast_attribute_for_storage(value, self.__casts__[key])

        setattr(self, key, value)

    def _cast_attribute_for_storage(self, value: Any, cast_type: str) -> Any:
        """Cast attribute for database storage."""
        if value is None:
            return None

        if cast_type == 'json':
            return json.dumps(value) if not isinstance(value, str) else value
        if cast_type in ('date', 'datetime', 'string') and not isinstance(value, str):
            return value.isoformat() if hasattr(value, 'isoformat') else str(value)

        return value

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r}>"
