"""Per-pass state shared by the linking steps."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..core.config import ConventionDefaults
from ..core.types import LinkReport
from ..host import ids
from ..host.interface import HostProject
from ..models.software import AndroidApplicationModel
from .buckets import DependencyBucketMerger


@dataclass
class LinkContext:
    """Everything a linking step may touch during one configuration pass."""

    project: HostProject
    model: Any
    report: LinkReport
    defaults: ConventionDefaults = field(default_factory=ConventionDefaults)
    merger: DependencyBucketMerger = field(init=False)
    activated: set[str] = field(default_factory=set)

    def __post_init__(self) -> None:
        self.merger = DependencyBucketMerger(self.project, self.report)

    @property
    def android_plugin_id(self) -> str:
        """Id of the host Android plugin expected for this model type."""
        if isinstance(self.model, AndroidApplicationModel):
            return ids.ANDROID_APPLICATION
        return ids.ANDROID_LIBRARY

    def apply_plugin(self, plugin_id: str) -> bool:
        return self.project.apply_plugin(plugin_id)

    def extension(self, name: str, plugin_id: str = "") -> Any:
        return self.project.get_extension(name, plugin_id)

    def android(self) -> Any:
        """Return the Android extension, which the host Android plugin registers."""
        return self.extension(ids.ANDROID_EXTENSION, self.android_plugin_id)
