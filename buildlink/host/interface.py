"""
Host build engine interface.

Defines the boundary between the linker and the externally-owned build engine:
plugin application, named dependency buckets, extension lookup, build variants
and the "configuration complete" callback.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Callable

from ..core.exceptions import BucketNotFoundError, MissingPrerequisiteError, VariantNotFoundError


class HostBucket(ABC):
    """A named, mutable sink of dependency coordinates."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Bucket name, e.g. ``implementation`` or ``debugImplementation``."""
        ...

    @abstractmethod
    def add_all(self, coordinates: Iterable[str]) -> None:
        """Append coordinates, preserving order."""
        ...


class HostVariant(ABC):
    """A host-side build type (debug, release)."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def set_minify_enabled(self, enabled: bool) -> None:
        ...

    @property
    @abstractmethod
    def android_test_enabled(self) -> bool:
        """Whether instrumented tests are built for this variant."""
        ...

    @abstractmethod
    def set_android_test_enabled(self, enabled: bool) -> None:
        ...

    @abstractmethod
    def proguard_file(self, rule_file: Path | str) -> None:
        """Append a post-processing rule file."""
        ...

    @abstractmethod
    def find_extension(self, name: str) -> Any | None:
        """Return a variant-level extension or None."""
        ...


class HostProject(ABC):
    """Abstract host project the linker drives."""

    @property
    @abstractmethod
    def path(self) -> str:
        """Hierarchical project path, e.g. ``:core:network``."""
        ...

    @property
    @abstractmethod
    def project_dir(self) -> Path:
        """Directory holding the project's sources."""
        ...

    @abstractmethod
    def apply_plugin(self, plugin_id: str) -> bool:
        """Apply a plugin by id.

        Applying an id that is already applied is a no-op.

        Returns:
            True if the plugin was newly applied.
        """
        ...

    @abstractmethod
    def has_plugin(self, plugin_id: str) -> bool:
        ...

    @abstractmethod
    def find_bucket(self, name: str) -> HostBucket | None:
        ...

    @abstractmethod
    def find_extension(self, name: str) -> Any | None:
        ...

    @abstractmethod
    def add_extension(self, name: str, extension: Any) -> None:
        ...

    @abstractmethod
    def find_variant(self, name: str) -> HostVariant | None:
        ...

    @abstractmethod
    def default_proguard_file(self, name: str) -> Path:
        """Resolve a default post-processing rule file shipped by the host."""
        ...

    @abstractmethod
    def after_evaluate(self, callback: Callable[[], object]) -> None:
        """Register a callback for the "configuration complete" signal."""
        ...

    @abstractmethod
    def find_property(self, name: str) -> str | None:
        """Return a project property (e.g. from gradle.properties) or None."""
        ...

    def bucket(self, name: str) -> HostBucket:
        """Get a bucket by name.

        Raises:
            BucketNotFoundError: If the host has not created the bucket.
        """
        bucket = self.find_bucket(name)
        if bucket is None:
            raise BucketNotFoundError(
                message="host has not created the bucket",
                bucket_name=name,
                context={"project": self.path},
            )
        return bucket

    def variant(self, name: str) -> HostVariant:
        """Get a build variant by name.

        Raises:
            VariantNotFoundError: If the variant does not exist.
        """
        variant = self.find_variant(name)
        if variant is None:
            raise VariantNotFoundError(
                message="declared variant has no host object",
                variant_name=name,
                context={"project": self.path},
            )
        return variant

    def get_extension(self, name: str, plugin_id: str = "") -> Any:
        """Get an extension registered by a prerequisite plugin.

        Args:
            name: Extension name.
            plugin_id: The plugin expected to register it, for diagnostics.

        Raises:
            MissingPrerequisiteError: If the extension is absent.
        """
        extension = self.find_extension(name)
        if extension is None:
            raise MissingPrerequisiteError(
                message="required extension is not registered",
                plugin_id=plugin_id,
                extension_name=name,
                context={"project": self.path},
            )
        return extension
