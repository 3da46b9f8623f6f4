"""
Typed field binding onto host objects.

Host objects are owned by the build engine and may reject assignments (unknown
field, value of the wrong type). Failures are wrapped with the target and the
value so the configuration pass reports what it was trying to do.
"""

from __future__ import annotations

from typing import Any

from ..core.exceptions import ReflectiveBindingError


def set_field(target: Any, field_name: str, value: Any) -> None:
    """Set a named scalar field on a host object.

    Raises:
        ReflectiveBindingError: If the target has no such field or rejects the value.
    """
    if not hasattr(target, field_name):
        raise ReflectiveBindingError(
            message="no such field on host object",
            target=target,
            field_name=field_name,
            value=value,
        )
    try:
        setattr(target, field_name, value)
    except (AttributeError, TypeError, ValueError) as e:
        raise ReflectiveBindingError(
            message="host object rejected the value",
            target=target,
            field_name=field_name,
            value=value,
            cause=e,
        ) from e
