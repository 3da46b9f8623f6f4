"""
Feature registry and the fixed feature catalog.

Each feature is a record: a name, a selector returning its toggle from the
model, and an activation closure. Activations run in catalog order, at most
once per pass, and only when the toggle is enabled. They may apply
prerequisite plugins (idempotent on the host), append coordinates to the
model's dependency buckets (merged after all features ran) and mutate
extensions registered by those plugins.

A feature also declares the plugin ids its activation applies, so the driver
can apply them before build variants are linked.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Callable

from ..core.logging import get_logger
from ..host import ids
from ..models.property import if_present
from ..models.software import (
    BaselineProfile,
    CoreLibraryDesugaring,
    FeatureToggle,
    Hilt,
    Jacoco,
    KotlinSerialization,
    Lint,
    Room,
    SoftwareModel,
)
from .binding import set_field
from .context import LinkContext
from .nia import configure_nia

logger = get_logger(__name__)

ToggleSelector = Callable[[SoftwareModel], FeatureToggle | None]
Activation = Callable[[LinkContext, Any], None]


@dataclass(frozen=True)
class Feature:
    """A catalog entry."""

    name: str
    toggle: ToggleSelector
    activate: Activation
    description: str = ""
    plugins: tuple[str, ...] = ()


def _enabled_toggle(ctx: LinkContext, feature: Feature) -> Any:
    toggle = feature.toggle(ctx.model)
    if toggle is None or not toggle.enabled.get():
        return None
    return toggle


class FeatureRegistry:
    """An ordered catalog of features."""

    def __init__(self) -> None:
        self._features: dict[str, Feature] = {}

    def __iter__(self) -> Iterator[Feature]:
        return iter(self._features.values())

    def __len__(self) -> int:
        return len(self._features)

    def add(self, feature: Feature) -> Feature:
        """Append a feature to the catalog.

        Raises:
            ValueError: If a feature with the same name is registered.
        """
        if feature.name in self._features:
            raise ValueError(f"Feature '{feature.name}' is already registered")
        self._features[feature.name] = feature
        return feature

    def register(
        self,
        name: str,
        toggle: ToggleSelector,
        description: str = "",
        plugins: tuple[str, ...] = (),
    ) -> Callable[[Activation], Activation]:
        """Register an activation closure.

        Used as a decorator:
            @registry.register("compose", lambda m: m.compose)
            def _compose(ctx, toggle):
                ...
        """

        def decorator(activate: Activation) -> Activation:
            self.add(Feature(name, toggle, activate, description, plugins))
            return activate

        return decorator

    def get(self, name: str) -> Feature | None:
        return self._features.get(name)

    def names(self) -> list[str]:
        return list(self._features)

    def activate(self, ctx: LinkContext, feature: Feature) -> bool:
        """Run a feature's activation if enabled and not yet run in this pass.

        Returns:
            True if the activation ran.
        """
        if feature.name in ctx.activated:
            return False
        toggle = _enabled_toggle(ctx, feature)
        if toggle is None:
            return False

        ctx.activated.add(feature.name)
        logger.info("Feature enabled", feature=feature.name)
        feature.activate(ctx, toggle)
        ctx.report.activated_features.append(feature.name)
        return True

    def activate_all(self, ctx: LinkContext) -> list[str]:
        """Activate every enabled feature, in catalog order.

        Returns:
            Names of the features activated by this call.
        """
        return [feature.name for feature in self if self.activate(ctx, feature)]

    def apply_prerequisites(self, ctx: LinkContext) -> list[str]:
        """Apply the declared plugins of every enabled feature, in catalog order.

        Returns:
            Plugin ids newly applied by this call.
        """
        applied = []
        for feature in self:
            if _enabled_toggle(ctx, feature) is None:
                continue
            applied.extend(plugin_id for plugin_id in feature.plugins if ctx.apply_plugin(plugin_id))
        if applied:
            logger.debug("Prerequisite plugins applied", plugins=applied)
        return applied


FEATURES = FeatureRegistry()


def configure_baseline_profile(ctx: LinkContext, toggle: BaselineProfile, extension: Any) -> None:
    """Configure a baseline profile extension at project or build type level."""
    ctx.apply_plugin(ids.BASELINE_PROFILE)
    set_field(
        extension,
        "automatic_generation_during_build",
        toggle.automatic_generation_during_build.get(),
    )
    ctx.merger.add("baselineProfile", toggle.dependencies)


@FEATURES.register(
    "roborazzi", lambda m: m.testing.roborazzi, "Screenshot testing", plugins=(ids.ROBORAZZI,)
)
def _roborazzi(ctx: LinkContext, toggle: FeatureToggle) -> None:
    ctx.apply_plugin(ids.ROBORAZZI)


@FEATURES.register("jacoco", lambda m: m.testing.jacoco, "Test coverage", plugins=(ids.JACOCO,))
def _jacoco(ctx: LinkContext, toggle: Jacoco) -> None:
    ctx.apply_plugin(ids.JACOCO)
    jacoco = ctx.extension(ids.JACOCO_EXTENSION, ids.JACOCO)
    set_field(jacoco, "tool_version", toggle.version.get())


@FEATURES.register(
    "kotlin_serialization",
    lambda m: m.kotlin_serialization,
    "kotlinx.serialization",
    plugins=(ids.KOTLIN_SERIALIZATION,),
)
def _kotlin_serialization(ctx: LinkContext, toggle: KotlinSerialization) -> None:
    ctx.apply_plugin(ids.KOTLIN_SERIALIZATION)
    ctx.model.dependencies.implementation.extend(toggle.dependencies)
    if toggle.json_enabled.get():
        ctx.model.dependencies.implementation.append(
            f"org.jetbrains.kotlinx:kotlinx-serialization-json:{toggle.version.get()}"
        )


@FEATURES.register(
    "core_library_desugaring", lambda m: m.core_library_desugaring, "Java API desugaring"
)
def _desugaring(ctx: LinkContext, toggle: CoreLibraryDesugaring) -> None:
    set_field(ctx.android().compile_options, "core_library_desugaring_enabled", True)
    ctx.model.dependencies.core_library_desugaring.append(
        f"com.android.tools:desugar_jdk_libs:{toggle.lib_version.get()}"
    )


@FEATURES.register(
    "hilt", lambda m: m.hilt, "Dependency injection code generation", plugins=(ids.KSP, ids.HILT)
)
def _hilt(ctx: LinkContext, toggle: Hilt) -> None:
    version = toggle.version.get()
    compiler = f"com.google.dagger:hilt-android-compiler:{version}"

    ctx.apply_plugin(ids.KSP)
    ctx.merger.add("ksp", [compiler])

    ctx.apply_plugin(ids.HILT)
    ctx.model.dependencies.implementation.append(f"com.google.dagger:hilt-android:{version}")
    ctx.merger.add("kspTest", [compiler])


@FEATURES.register("compose", lambda m: m.compose, "Jetpack Compose", plugins=(ids.KOTLIN_COMPOSE,))
def _compose(ctx: LinkContext, toggle: FeatureToggle) -> None:
    ctx.apply_plugin(ids.KOTLIN_COMPOSE)
    set_field(ctx.android().build_features, "compose", True)


@FEATURES.register(
    "room", lambda m: m.room, "Local database code generation", plugins=(ids.ROOM, ids.KSP)
)
def _room(ctx: LinkContext, toggle: Room) -> None:
    ctx.apply_plugin(ids.ROOM)
    ctx.apply_plugin(ids.KSP)

    ksp = ctx.extension(ids.KSP_EXTENSION, ids.KSP)
    ksp.arg("room.generateKotlin", "true")

    room = ctx.extension(ids.ROOM_EXTENSION, ids.ROOM)
    # Schemas are required for auto migrations
    if_present(toggle.schema_directory, lambda d: set_field(room, "schema_directory", d))

    version = toggle.version.get()
    ctx.model.dependencies.implementation.append(f"androidx.room:room-runtime:{version}")
    ctx.model.dependencies.implementation.append(f"androidx.room:room-ktx:{version}")
    ctx.merger.add("ksp", [f"androidx.room:room-compiler:{version}"])


@FEATURES.register(
    "licenses", lambda m: m.licenses, "Open source license report", plugins=(ids.OSS_LICENSES,)
)
def _licenses(ctx: LinkContext, toggle: FeatureToggle) -> None:
    ctx.apply_plugin(ids.OSS_LICENSES)


@FEATURES.register("lint", lambda m: m.lint, "Android lint reporting")
def _lint(ctx: LinkContext, toggle: Lint) -> None:
    lint = ctx.android().lint
    set_field(lint, "xml_report", toggle.xml_report.get())
    set_field(lint, "check_dependencies", toggle.check_dependencies.get())


@FEATURES.register(
    "baseline_profile",
    lambda m: m.baseline_profile,
    "Performance profiles",
    plugins=(ids.BASELINE_PROFILE,),
)
def _baseline_profile(ctx: LinkContext, toggle: BaselineProfile) -> None:
    ctx.apply_plugin(ids.BASELINE_PROFILE)
    extension = ctx.extension(ids.BASELINE_PROFILE_EXTENSION, ids.BASELINE_PROFILE)
    configure_baseline_profile(ctx, toggle, extension)


FEATURES.add(
    Feature(
        "nia",
        lambda m: getattr(m, "nia", None),
        configure_nia,
        "Now in Android library conventions",
    )
)
