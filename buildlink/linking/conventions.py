"""
Convention resolution.

Installs default values on a software model at plugin-apply time. Conventions
never override explicit values and, being lazy, the computed ones observe
edits made after this runs.
"""

from __future__ import annotations

from typing import TypeVar

from ..core.config import ConventionDefaults
from ..core.logging import get_logger
from ..models.property import Property
from ..models.software import AndroidLibraryModel, SoftwareModel

T = TypeVar("T")

logger = get_logger(__name__)


def _seed(prop: Property[T], value: T) -> None:
    # Read properties are fixed for the rest of the pass
    if not prop.is_finalized:
        prop.convention(value)


class ConventionResolver:
    """Seeds a software model with convention values."""

    def __init__(self, defaults: ConventionDefaults | None = None) -> None:
        self.defaults = defaults or ConventionDefaults()

    def resolve(self, model: SoftwareModel) -> None:
        """Install conventions on every defaulted property of the model.

        Safe to run repeatedly: only conventions are (re)installed, explicit
        values are untouched.
        """
        d = self.defaults

        _seed(model.min_sdk, d.min_sdk)
        _seed(model.vector_drawables_use_support_library, False)

        for build_type in model.build_types:
            _seed(build_type.minify.enabled, False)
            _seed(build_type.baseline_profile.enabled, False)
            _seed(build_type.baseline_profile.automatic_generation_during_build, False)

        # Desugar automatically when targeting a JDK above the threshold
        if not model.core_library_desugaring.enabled.is_finalized:
            model.core_library_desugaring.enabled.convention_from(
                lambda: model.jdk_version.is_present()
                and model.jdk_version.get() > d.desugaring_jdk_threshold
            )
        _seed(model.core_library_desugaring.lib_version, d.desugar_lib_version)

        _seed(model.kotlin_serialization.enabled, False)
        _seed(model.kotlin_serialization.version, d.serialization_version)
        _seed(model.kotlin_serialization.json_enabled, False)

        _seed(model.lint.enabled, False)
        _seed(model.lint.xml_report, False)
        _seed(model.lint.check_dependencies, False)

        _seed(model.compose.enabled, False)
        _seed(model.hilt.enabled, False)
        _seed(model.hilt.version, d.hilt_version)
        _seed(model.room.enabled, False)
        _seed(model.room.version, d.room_version)
        _seed(model.licenses.enabled, False)
        _seed(model.baseline_profile.enabled, False)
        _seed(model.baseline_profile.automatic_generation_during_build, False)

        testing = model.testing
        _seed(testing.test_options.include_android_resources, False)
        _seed(testing.test_options.return_default_values, False)
        _seed(testing.jacoco.enabled, False)
        _seed(testing.jacoco.version, d.jacoco_version)
        _seed(testing.roborazzi.enabled, False)

        if isinstance(model, AndroidLibraryModel):
            _seed(model.nia.enabled, False)

        logger.debug("Conventions installed", model=type(model).__name__)
