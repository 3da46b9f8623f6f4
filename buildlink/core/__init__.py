"""Core infrastructure components for buildlink."""

from .config import Config, ConventionDefaults, get_config
from .exceptions import (
    BucketNotFoundError,
    BuildLinkError,
    DuplicateExtensionError,
    LinkPhaseError,
    MissingPrerequisiteError,
    PropertyStateError,
    ReflectiveBindingError,
    ValidationError,
    VariantNotFoundError,
)
from .logging import get_logger, setup_logging
from .types import LinkReport, LinkState

__all__ = [
    "Config",
    "ConventionDefaults",
    "get_config",
    "BucketNotFoundError",
    "BuildLinkError",
    "DuplicateExtensionError",
    "LinkPhaseError",
    "MissingPrerequisiteError",
    "PropertyStateError",
    "ReflectiveBindingError",
    "ValidationError",
    "VariantNotFoundError",
    "get_logger",
    "setup_logging",
    "LinkReport",
    "LinkState",
]
