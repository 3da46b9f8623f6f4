"""
Custom exception hierarchy for buildlink.

All exceptions inherit from BuildLinkError. Every error raised while linking a
model is fatal for that configuration pass: mutations already made on the host
stay in place and nothing is retried.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class BuildLinkError(Exception):
    """Base exception for all buildlink errors."""

    message: str
    context: dict[str, Any] = field(default_factory=dict)
    cause: Exception | None = None

    def __str__(self) -> str:
        ctx = f" | context: {self.context}" if self.context else ""
        cause = f" | caused by: {self.cause}" if self.cause else ""
        return f"{self.message}{ctx}{cause}"


@dataclass
class ValidationError(BuildLinkError):
    """Raised when values applied to a model do not match its shape."""

    field_name: str | None = None

    def __str__(self) -> str:
        base = super().__str__()
        if self.field_name:
            return f"Validation failed for '{self.field_name}': {base}"
        return f"Validation failed: {base}"


@dataclass
class PropertyStateError(BuildLinkError):
    """Raised when a property is read while absent or written after being read."""

    property_name: str = ""

    def __str__(self) -> str:
        return f"Property '{self.property_name}': {super().__str__()}"


@dataclass
class MissingPrerequisiteError(BuildLinkError):
    """Raised when an extension or plugin required by an activation is absent."""

    plugin_id: str = ""
    extension_name: str = ""

    def __str__(self) -> str:
        base = super().__str__()
        return f"[plugin: {self.plugin_id or '?'}, extension: {self.extension_name or '?'}] {base}"


@dataclass
class BucketNotFoundError(BuildLinkError):
    """Raised when a named dependency bucket does not exist on the host."""

    bucket_name: str = ""

    def __str__(self) -> str:
        return f"Bucket '{self.bucket_name}' not found: {super().__str__()}"


@dataclass
class VariantNotFoundError(BuildLinkError):
    """Raised when a fixed build variant has no host counterpart."""

    variant_name: str = ""

    def __str__(self) -> str:
        return f"Variant '{self.variant_name}' not found: {super().__str__()}"


@dataclass
class ReflectiveBindingError(BuildLinkError):
    """Raised when a named field cannot be set on a host object.

    Carries the target object and the rejected value for diagnostics.
    """

    target: Any = None
    field_name: str = ""
    value: Any = None

    def __str__(self) -> str:
        return (
            f"Cannot set '{self.field_name}' = {self.value!r} on "
            f"{type(self.target).__name__}: {super().__str__()}"
        )


@dataclass
class LinkPhaseError(BuildLinkError):
    """Raised when the deferred link phase is triggered out of order."""

    state: str = ""

    def __str__(self) -> str:
        return f"Link phase error in state '{self.state}': {super().__str__()}"


@dataclass
class DuplicateExtensionError(BuildLinkError):
    """Raised when a host extension name is registered twice on a project."""

    extension_name: str = ""

    def __str__(self) -> str:
        return f"Extension '{self.extension_name}' already registered: {super().__str__()}"
