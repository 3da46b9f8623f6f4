"""
Software type plugin base.

A software type plugin creates the declarative model, registers it as a named
extension, applies the host plugins the model links onto and hands the model
to a deferred link driver.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from ..core.config import Config, get_config
from ..core.logging import get_logger
from ..host.interface import HostProject
from ..linking.driver import DeferredLinkDriver

logger = get_logger(__name__)


class SoftwarePlugin(ABC):
    """Base class for software type plugins."""

    plugin_id: ClassVar[str]
    model_name: ClassVar[str]
    host_plugin_ids: ClassVar[tuple[str, ...]]

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or get_config()

    @abstractmethod
    def create_model(self) -> Any:
        """Create a fresh model for one configuration pass."""
        ...

    @abstractmethod
    def create_driver(self, project: HostProject, model: Any) -> DeferredLinkDriver:
        ...

    def configure_host(self, project: HostProject, model: Any) -> None:
        """Adjust host objects right after the host plugins are applied."""

    def apply(self, project: HostProject) -> DeferredLinkDriver:
        """Apply the plugin to a host project.

        Returns:
            The driver owning the model. Configure the model through it, then
            let the host signal configuration complete.
        """
        model = self.create_model()
        project.add_extension(self.model_name, model)
        for plugin_id in self.host_plugin_ids:
            project.apply_plugin(plugin_id)
        self.configure_host(project, model)

        driver = self.create_driver(project, model)
        driver.apply()
        logger.info("Software plugin applied", plugin_id=self.plugin_id)
        return driver
