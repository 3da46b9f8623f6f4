"""Software type plugins."""

from .android import AndroidApplicationPlugin, AndroidLibraryPlugin, AndroidSoftwarePlugin
from .base import SoftwarePlugin
from .jvm import SpringApplicationPlugin

SOFTWARE_TYPES: dict[str, type[SoftwarePlugin]] = {
    "library": AndroidLibraryPlugin,
    "application": AndroidApplicationPlugin,
    "spring_application": SpringApplicationPlugin,
}

__all__ = [
    "SOFTWARE_TYPES",
    "AndroidApplicationPlugin",
    "AndroidLibraryPlugin",
    "AndroidSoftwarePlugin",
    "SoftwarePlugin",
    "SpringApplicationPlugin",
]
