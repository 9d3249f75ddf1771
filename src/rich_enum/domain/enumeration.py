"""
Enumeration - Domain Value Object base

A rich enumeration is a closed set of named members, each carrying an integer
``value``, a ``display_name`` and whatever behavior the concrete subclass
attaches. Members are declared as public class attributes of the subclass:

    class Status(Enumeration):
        ACTIVE = member(1, 'Active')
        INACTIVE = member(2, 'Inactive')

or assigned after the class statement (``Status.ARCHIVED = Status(3, 'Archived')``).
The base keeps no registry; discovery re-reads the subclass namespace each call.

Declared members are built on first access by the class that finally owns
them, so decorators that rebuild the class (``@attrs.define``) and extra
attrs fields on the subclass work as expected. Subclasses decorated with
attrs should pass ``eq=False`` to keep value-based equality and hashing.
"""

from collections.abc import Callable, Iterator
from threading import Lock
from typing import Any, Self

import attrs

from rich_enum.platform.config.core_setting import settings
from rich_enum.platform.exception.exceptions import (
    DomainError,
    DuplicateEnumerationValueError,
    EnumerationNotFoundError,
    EnumerationValueLockedError,
)
from rich_enum.platform.logging.loguru_io import Logger


_member_build_lock = Lock()


def _int_not_bool(instance: Any, attribute: 'attrs.Attribute[Any]', value: Any) -> None:
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise TypeError(f"'{attribute.name}' must be an int, got {type(value).__name__}")


@attrs.define(eq=False)
class EnumerationMember:
    """Constructor arguments recorded in a class body, built into a member on first access."""

    args: tuple[Any, ...]
    kwargs: dict[str, Any]
    name: str | None = None
    owner: type | None = None

    @property
    def declared_value(self) -> Any:
        return self.args[0] if self.args else self.kwargs.get('value')

    def __set_name__(self, owner: type, name: str) -> None:
        # Called again for the class an attrs decorator rebuilds, so owner is the final class
        self.owner = owner
        self.name = name

    def __get__(self, instance: Any, owner: type) -> Any:
        with _member_build_lock:
            built = vars(self.owner).get(self.name)
            if built is self:
                built = self.owner(*self.args, **self.kwargs)  # type: ignore[misc]
                setattr(self.owner, self.name, built)
            return built


def member(*args: Any, **kwargs: Any) -> Any:
    return EnumerationMember(args=args, kwargs=kwargs)


@attrs.define(eq=False, order=False, repr=False, slots=False)
class Enumeration:
    _value: int | None = attrs.field(default=None, validator=_int_not_bool)
    _display_name: str | None = attrs.field(
        default=None, validator=attrs.validators.optional(attrs.validators.instance_of(str))
    )

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.check_unique_values()

    @property
    def value(self) -> int | None:
        return self._value

    @property
    def display_name(self) -> str | None:
        return self._display_name

    @classmethod
    def _require_int(cls, candidate: Any) -> None:
        if isinstance(candidate, bool) or not isinstance(candidate, int):
            raise DomainError(
                f'{cls.__name__} value must be an int, got {type(candidate).__name__}'
            )

    @classmethod
    def _declared_items(cls) -> list[tuple[str, Self]]:
        # Declared directly on cls only; members of parent sets are not inherited
        items = []
        for name, attr in list(vars(cls).items()):
            if name.startswith('_'):
                continue
            if isinstance(attr, EnumerationMember):
                attr = getattr(cls, name)
            if isinstance(attr, cls):
                items.append((name, attr))
        return items

    @classmethod
    def check_unique_values(cls) -> None:
        """
        Fail fast when two declared members share a value.

        Runs automatically when the subclass is created, without building the
        members. Call it again after assigning members outside the class body.
        """
        names_by_value: dict[Any, list[str]] = {}
        for name, attr in list(vars(cls).items()):
            if name.startswith('_'):
                continue
            if isinstance(attr, EnumerationMember):
                value = attr.declared_value
            elif isinstance(attr, cls):
                value = attr.value
            else:
                continue
            names_by_value.setdefault(value, []).append(name)
        for value, names in names_by_value.items():
            if len(names) > 1:
                raise DuplicateEnumerationValueError(value, cls.__name__, tuple(names))

    @classmethod
    def get_all(cls) -> Iterator[Self]:
        """Yield each declared member once, in declaration order."""
        for _, item in cls._declared_items():
            yield item

    @classmethod
    def _parse(cls, key: Any, kind: str, predicate: Callable[[Self], bool]) -> Self:
        matching_item = next((item for item in cls.get_all() if predicate(item)), None)
        if matching_item is None:
            raise EnumerationNotFoundError(key=key, kind=kind, type_name=cls.__name__)
        return matching_item

    @classmethod
    @Logger.io
    def from_value(cls, value: int) -> Self:
        cls._require_int(value)
        return cls._parse(value, 'value', lambda item: item.value == value)

    @classmethod
    @Logger.io
    def from_display_name(cls, display_name: str) -> Self:
        return cls._parse(
            display_name, 'display name', lambda item: item.display_name == display_name
        )

    def set_value(self, candidate: int) -> None:
        """
        Resolve an empty instance (built with no arguments) to a declared member.

        Used by persistence layers that can only assign the stored scalar. A
        matching member lends its value and display name; an unknown value is
        kept as-is so rows written before a member was removed still load.
        """
        if self._value is not None:
            raise EnumerationValueLockedError(type(self).__name__, self._value)
        type(self)._require_int(candidate)

        for item in type(self).get_all():
            if item.value == candidate:
                self._value = item.value
                self._display_name = item.display_name
                return

        self._value = candidate
        if settings.WARN_ON_UNKNOWN_VALUE:
            Logger.base.warning(
                f'{type(self).__name__} has no member with value {candidate}, keeping raw value'
            )

    @classmethod
    @Logger.io
    def from_stored_value(cls, raw: int) -> Self:
        """Canonical member for a stored value, or a detached instance holding the raw value."""
        cls._require_int(raw)
        for item in cls.get_all():
            if item.value == raw:
                return item
        shell = cls()
        shell.set_value(raw)
        return shell

    @staticmethod
    def absolute_difference(first: 'Enumeration', second: 'Enumeration') -> int:
        return abs(first.value - second.value)  # type: ignore[operator]

    def compare_to(self, other: 'Enumeration') -> int:
        left, right = self._value, other._value
        return (left > right) - (left < right)  # type: ignore[operator]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Enumeration):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Enumeration):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Enumeration):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Enumeration):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Enumeration):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        return self._display_name if self._display_name is not None else str(self._value)

    def __repr__(self) -> str:
        type_name = type(self).__name__
        for name, item in type(self)._declared_items():
            if item is self:
                return f'<{type_name}.{name}: {self._value} {self._display_name!r}>'
        return f'<{type_name}: {self._value}>'


absolute_difference = Enumeration.absolute_difference
