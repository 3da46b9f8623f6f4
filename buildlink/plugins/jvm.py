"""Spring Boot application software type plugin."""

from __future__ import annotations

from ..host import ids
from ..host.interface import HostProject
from ..linking.jvm import JvmLinkDriver, default_test_suite
from ..models.jvm import SpringApplicationModel
from .base import SoftwarePlugin


class SpringApplicationPlugin(SoftwarePlugin):
    plugin_id = "org.gradle.experimental.spring-application"
    model_name = "springApplication"
    host_plugin_ids = (ids.APPLICATION, ids.SPRING_BOOT)

    def create_model(self) -> SpringApplicationModel:
        return SpringApplicationModel()

    def configure_host(self, project: HostProject, model: SpringApplicationModel) -> None:
        default_test_suite(project).use_junit_jupiter()

    def create_driver(self, project: HostProject, model: SpringApplicationModel) -> JvmLinkDriver:
        return JvmLinkDriver(project, model, defaults=self.config.conventions)
