"""
Toolchain and compatibility projection.

Copies the final scalar properties of the model onto the host's Android and
Kotlin extensions: namespace, SDK levels, JDK toolchain and Java source/target
compatibility, test runner options and, for applications, the identity fields.
"""

from __future__ import annotations

from ..host import ids
from ..models.property import if_present
from ..models.software import AndroidApplicationModel
from .binding import set_field
from .context import LinkContext


def java_version(jdk: int) -> str:
    """Return the host's Java version constant name for a JDK release."""
    if jdk <= 8:
        return f"VERSION_1_{jdk}"
    return f"VERSION_{jdk}"


def link_toolchain(ctx: LinkContext) -> None:
    """Project toolchain and compatibility settings onto the host."""
    model = ctx.model
    android = ctx.android()
    kotlin = ctx.extension(ids.KOTLIN_EXTENSION, ids.KOTLIN_ANDROID)
    default_config = android.default_config

    if_present(model.namespace, lambda v: set_field(android, "namespace", v))
    if_present(model.compile_sdk, lambda v: set_field(android, "compile_sdk", v))
    if_present(model.min_sdk, lambda v: set_field(default_config, "min_sdk", v))
    if_present(
        model.vector_drawables_use_support_library,
        lambda v: set_field(default_config, "vector_drawables_use_support_library", v),
    )

    def link_jdk(jdk: int) -> None:
        # Up to Java 11 APIs are available through desugaring
        set_field(kotlin, "jvm_toolchain", jdk)
        set_field(android.compile_options, "source_compatibility", java_version(jdk))
        set_field(android.compile_options, "target_compatibility", java_version(jdk))

    if_present(model.jdk_version, link_jdk)

    test_options = model.testing.test_options
    if_present(
        test_options.test_instrumentation_runner,
        lambda v: set_field(default_config, "test_instrumentation_runner", v),
    )
    set_field(android.unit_tests, "include_android_resources", test_options.include_android_resources.get())
    set_field(android.unit_tests, "return_default_values", test_options.return_default_values.get())

    if isinstance(model, AndroidApplicationModel):
        if_present(model.application_id, lambda v: set_field(default_config, "application_id", v))
        if_present(model.version_code, lambda v: set_field(default_config, "version_code", v))
        if_present(model.version_name, lambda v: set_field(default_config, "version_name", v))
