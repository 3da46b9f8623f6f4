"""Host build engine boundary and the in-memory reference engine."""

from .interface import HostBucket, HostProject, HostVariant
from .memory import MemoryHostProject

__all__ = ["HostBucket", "HostProject", "HostVariant", "MemoryHostProject"]
