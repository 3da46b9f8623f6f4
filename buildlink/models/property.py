"""
Lazily-valued model properties.

A Property holds an optional explicit value and an optional convention. The
convention is either a literal or a supplier evaluated at first read, so it can
depend on other properties that are still being configured. The first read
finalizes the property: its effective value never changes afterwards.
"""

from __future__ import annotations

from dataclasses import field
from typing import Any, Callable, Generic, TypeVar

from ..core.exceptions import PropertyStateError

T = TypeVar("T")

_UNSET = object()


class Property(Generic[T]):
    """A single named, optionally-set value with a convention."""

    def __init__(self, name: str, value_type: type | None = None) -> None:
        """Initialize the property.

        Args:
            name: Dotted name used in diagnostics.
            value_type: Type accepted by ``accepts``. Any value when not provided.
        """
        self.name = name
        self.value_type = value_type
        self._explicit: object = _UNSET
        self._convention: object = _UNSET
        self._supplier: Callable[[], T | None] | None = None
        self._final: object = _UNSET
        self._read = False

    def __repr__(self) -> str:
        if self._read:
            return f"Property({self.name}={self.get_or_none()!r}, final)"
        if self._explicit is not _UNSET:
            return f"Property({self.name}={self._explicit!r})"
        return f"Property({self.name}, unset)"

    @property
    def is_explicit(self) -> bool:
        """Whether a value was set explicitly."""
        return self._explicit is not _UNSET

    @property
    def is_finalized(self) -> bool:
        """Whether the property has been read."""
        return self._read

    def accepts(self, value: object) -> bool:
        """Whether value matches the declared value type."""
        if self.value_type is None:
            return True
        # bool is an int subclass but never a valid int setting
        if isinstance(value, bool) and self.value_type is not bool:
            return False
        return isinstance(value, self.value_type)

    def _check_mutable(self, action: str) -> None:
        if self.is_finalized:
            raise PropertyStateError(
                message=f"cannot {action} after the value has been read",
                property_name=self.name,
                context={"value": self.get_or_none()},
            )

    def set(self, value: T) -> None:
        """Set an explicit value, overriding any convention."""
        self._check_mutable("set a value")
        self._explicit = value

    def convention(self, value: T) -> Property[T]:
        """Install a literal default used when no explicit value is set."""
        self._check_mutable("change the convention")
        self._convention = value
        self._supplier = None
        return self

    def convention_from(self, supplier: Callable[[], T | None]) -> Property[T]:
        """Install a default computed at first read."""
        self._check_mutable("change the convention")
        self._convention = _UNSET
        self._supplier = supplier
        return self

    def _resolve(self) -> object:
        if self._read:
            return self._final
        if self._explicit is not _UNSET:
            value = self._explicit
        elif self._supplier is not None:
            supplied = self._supplier()
            value = _UNSET if supplied is None else supplied
        else:
            value = self._convention
        self._final = value
        self._read = True
        return value

    def is_present(self) -> bool:
        """Whether the property resolves to a value. Finalizes the property."""
        return self._resolve() is not _UNSET

    def get(self) -> T:
        """Return the effective value, finalizing the property."""
        value = self._resolve()
        if value is _UNSET:
            raise PropertyStateError(message="no value present", property_name=self.name)
        return value  # type: ignore[return-value]

    def get_or_none(self) -> T | None:
        """Return the effective value or None when absent."""
        value = self._resolve()
        return None if value is _UNSET else value  # type: ignore[return-value]


def if_present(prop: Property[T], setter: Callable[[T], object]) -> bool:
    """Call setter with the property's value when one is present.

    Returns:
        True when the setter was called.
    """
    value = prop.get_or_none()
    if value is None:
        return False
    setter(value)
    return True


def property_field(name: str, value_type: type) -> Any:
    """Declare a dataclass field holding a fresh typed Property."""
    return field(default_factory=lambda: Property(name, value_type))
