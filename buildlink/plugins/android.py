"""Android software type plugins."""

from __future__ import annotations

from ..core.config import Config
from ..host import ids
from ..host.interface import HostProject
from ..linking.driver import DeferredLinkDriver
from ..linking.features import FeatureRegistry
from ..models.software import AndroidApplicationModel, AndroidLibraryModel, SoftwareModel
from .base import SoftwarePlugin


class AndroidSoftwarePlugin(SoftwarePlugin):
    """Base class for Android software type plugins."""

    def __init__(self, config: Config | None = None, registry: FeatureRegistry | None = None) -> None:
        super().__init__(config)
        self.registry = registry

    def create_driver(self, project: HostProject, model: SoftwareModel) -> DeferredLinkDriver:
        return DeferredLinkDriver(
            project, model, registry=self.registry, defaults=self.config.conventions
        )


class AndroidLibraryPlugin(AndroidSoftwarePlugin):
    plugin_id = "org.gradle.experimental.android-library"
    model_name = "androidLibrary"
    host_plugin_ids = (ids.ANDROID_LIBRARY, ids.KOTLIN_ANDROID)

    def create_model(self) -> AndroidLibraryModel:
        return AndroidLibraryModel()


class AndroidApplicationPlugin(AndroidSoftwarePlugin):
    plugin_id = "org.gradle.experimental.android-application"
    model_name = "androidApplication"
    host_plugin_ids = (ids.ANDROID_APPLICATION, ids.KOTLIN_ANDROID)

    def create_model(self) -> AndroidApplicationModel:
        return AndroidApplicationModel()
