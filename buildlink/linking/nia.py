"""
"Now in Android" library conventions.

Opinionated defaults shared by the NiA sample's library modules: tracing and
test dependencies, a fixed target SDK, resource prefixes derived from the
project path, a content-type flavor dimension and Kotlin compiler settings.
Instrumented tests are switched off for variants of modules without an
``src/androidTest`` directory.
"""

from __future__ import annotations

from enum import Enum

from ..core.logging import get_logger
from ..host import ids
from ..models.software import VARIANT_NAMES, FeatureToggle
from .binding import set_field
from .context import LinkContext
from .resources import build_resource_prefix

logger = get_logger(__name__)

TRACING = "androidx.tracing:tracing-ktx:1.3.0-alpha02"
KOTLIN_TEST = "org.jetbrains.kotlin:kotlin-test"
COROUTINES_OPT_IN = "-opt-in=kotlinx.coroutines.ExperimentalCoroutinesApi"
JVM_TARGET = "11"


class FlavorDimension(str, Enum):
    CONTENT_TYPE = "contentType"


class NiaFlavor(str, Enum):
    DEMO = "demo"
    PROD = "prod"

    @property
    def dimension(self) -> FlavorDimension:
        return FlavorDimension.CONTENT_TYPE


def configure_nia(ctx: LinkContext, toggle: FeatureToggle) -> None:
    """Apply the NiA library conventions to the project."""
    android = ctx.android()

    deps = ctx.model.dependencies
    deps.implementation.append(TRACING)
    deps.core_library_desugaring.append(
        f"com.android.tools:desugar_jdk_libs:{ctx.defaults.desugar_lib_version}"
    )
    deps.test_implementation.append(KOTLIN_TEST)

    set_field(android.default_config, "target_sdk", ctx.defaults.target_sdk)
    set_field(android, "resource_prefix", build_resource_prefix(ctx.project.path))

    _configure_flavors(android)
    _configure_kotlin(ctx)
    _disable_unnecessary_android_tests(ctx)

    set_field(android.lint, "xml_report", True)
    set_field(android.lint, "check_dependencies", True)


def _configure_flavors(android: object) -> None:
    dimensions = list(android.flavor_dimensions)  # type: ignore[attr-defined]
    if FlavorDimension.CONTENT_TYPE.value not in dimensions:
        dimensions.append(FlavorDimension.CONTENT_TYPE.value)
        set_field(android, "flavor_dimensions", dimensions)

    for flavor in NiaFlavor:
        product_flavor = android.create_flavor(flavor.value)  # type: ignore[attr-defined]
        set_field(product_flavor, "dimension", flavor.dimension.value)


def _configure_kotlin(ctx: LinkContext) -> None:
    kotlin = ctx.extension(ids.KOTLIN_EXTENSION, ids.KOTLIN_ANDROID)
    set_field(kotlin, "jvm_target", JVM_TARGET)

    # Override with warningsAsErrors=true in ~/.gradle/gradle.properties
    warnings_as_errors = (ctx.project.find_property("warningsAsErrors") or "").lower() == "true"
    set_field(kotlin, "all_warnings_as_errors", warnings_as_errors)

    set_field(kotlin, "free_compiler_args", [*kotlin.free_compiler_args, COROUTINES_OPT_IN])
    logger.debug("Kotlin compiler configured", jvm_target=JVM_TARGET, warnings_as_errors=warnings_as_errors)


def _disable_unnecessary_android_tests(ctx: LinkContext) -> None:
    has_android_tests = (ctx.project.project_dir / "src" / "androidTest").exists()
    for name in VARIANT_NAMES:
        variant = ctx.project.variant(name)
        variant.set_android_test_enabled(variant.android_test_enabled and has_android_tests)
    if not has_android_tests:
        logger.debug("Android tests disabled", reason="no src/androidTest directory")
