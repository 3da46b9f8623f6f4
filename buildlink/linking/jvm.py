"""
Linking of JVM application models.

Projects the Java version onto the host toolchain, the main class onto the
application and Spring Boot extensions, and the source set dependencies onto
the main and ``test`` buckets. The test suite runs on the testing Java version,
which follows the application's unless set.
"""

from __future__ import annotations

from typing import Any

from ..core.exceptions import MissingPrerequisiteError
from ..core.logging import get_logger
from ..host import ids
from ..host.interface import HostProject
from ..models.property import if_present
from .binding import set_field
from .context import LinkContext
from .driver import DeferredLinkDriver

logger = get_logger(__name__)

TEST_SUITE = "test"


def default_test_suite(project: HostProject) -> Any:
    """Return the host's default JVM test suite.

    Raises:
        MissingPrerequisiteError: If the application plugin registered no such suite.
    """
    testing = project.get_extension(ids.TESTING_EXTENSION, ids.APPLICATION)
    suite = testing.suites.get(TEST_SUITE)
    if suite is None:
        raise MissingPrerequisiteError(
            message=f"no '{TEST_SUITE}' test suite registered",
            plugin_id=ids.APPLICATION,
            extension_name=ids.TESTING_EXTENSION,
        )
    return suite


def link_spring_application(ctx: LinkContext) -> None:
    """Link a Spring application model onto the host."""
    model = ctx.model
    java = ctx.extension(ids.JAVA_EXTENSION, ids.APPLICATION)
    application = ctx.extension(ids.APPLICATION_EXTENSION, ids.APPLICATION)
    spring_boot = ctx.extension(ids.SPRING_BOOT_EXTENSION, ids.SPRING_BOOT)

    if_present(model.java_version, lambda v: set_field(java, "toolchain_language_version", v))

    def link_main_class(main_class: str) -> None:
        set_field(application, "main_class", main_class)
        set_field(spring_boot, "main_class", main_class)

    if_present(model.main_class, link_main_class)
    ctx.merger.merge(model.dependencies)

    suite = default_test_suite(ctx.project)
    if_present(model.testing.java_version, lambda v: set_field(suite, "java_launcher_version", v))
    ctx.merger.merge(model.testing.dependencies, variant=TEST_SUITE)
    logger.debug("JVM application linked", main_class=model.main_class.get_or_none())


class JvmLinkDriver(DeferredLinkDriver):
    """Deferred driver for JVM application models."""

    def install_conventions(self) -> None:
        testing_version = self.model.testing.java_version
        if not testing_version.is_finalized:
            testing_version.convention_from(self.model.java_version.get_or_none)

    def run_steps(self, ctx: LinkContext) -> None:
        link_spring_application(ctx)
