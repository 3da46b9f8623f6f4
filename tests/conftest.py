"""Test configuration for buildlink."""

import logging

import pytest
import structlog

from buildlink.core.config import Config
from buildlink.core.types import LinkReport
from buildlink.host import ids
from buildlink.host.memory import MemoryHostProject
from buildlink.linking.context import LinkContext
from buildlink.linking.conventions import ConventionResolver
from buildlink.models.software import AndroidLibraryModel
from buildlink.plugins.android import AndroidLibraryPlugin


@pytest.fixture(autouse=True)
def quiet_logging():
    """Silence structured logging during tests.

    Yields:
        None. Structlog defaults are restored after the test.
    """
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL),
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def config():
    """Create a configuration with built-in defaults.

    Returns:
        Config: Configuration unaffected by environment variables.
    """
    return Config()


@pytest.fixture
def project():
    """Create an empty in-memory host project at ``:core:network``.

    Returns:
        MemoryHostProject: A project with no plugins applied.
    """
    return MemoryHostProject(":core:network")


@pytest.fixture
def android_project(project):
    """Create a project with the Android library and Kotlin plugins applied.

    Returns:
        MemoryHostProject: A project with standard buckets and variants.
    """
    project.apply_plugin(ids.ANDROID_LIBRARY)
    project.apply_plugin(ids.KOTLIN_ANDROID)
    return project


@pytest.fixture
def library_model():
    """Create a library model with conventions installed.

    Returns:
        AndroidLibraryModel: A freshly seeded model.
    """
    model = AndroidLibraryModel()
    ConventionResolver().resolve(model)
    return model


@pytest.fixture
def link_context(android_project, library_model):
    """Create a link context over the Android project and library model.

    Returns:
        LinkContext: Context for exercising individual linking steps.
    """
    return LinkContext(
        android_project, library_model, LinkReport(project_path=android_project.path)
    )


@pytest.fixture
def library_driver(project, config):
    """Apply the Android library plugin to the project.

    Returns:
        DeferredLinkDriver: The driver owning the library model.
    """
    return AndroidLibraryPlugin(config).apply(project)
