"""
Declarative software models.

These dataclasses form the property graph a caller populates to describe an
Android library or application. Scalars are Property instances so conventions
can be installed lazily; dependency buckets are plain ordered lists.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any

from ..core.exceptions import ValidationError
from .property import Property, property_field

VARIANT_NAMES: tuple[str, ...] = ("debug", "release")

# Model field name -> host bucket name
BUCKET_NAMES: dict[str, str] = {
    "implementation": "implementation",
    "compile_only": "compileOnly",
    "runtime_only": "runtimeOnly",
    "test_implementation": "testImplementation",
    "test_compile_only": "testCompileOnly",
    "test_runtime_only": "testRuntimeOnly",
    "android_test_implementation": "androidTestImplementation",
    "core_library_desugaring": "coreLibraryDesugaring",
}


@dataclass
class DependencySpec:
    """Named buckets of dependency coordinates (``group:artifact:version``)."""

    implementation: list[str] = field(default_factory=list)
    compile_only: list[str] = field(default_factory=list)
    runtime_only: list[str] = field(default_factory=list)
    test_implementation: list[str] = field(default_factory=list)
    test_compile_only: list[str] = field(default_factory=list)
    test_runtime_only: list[str] = field(default_factory=list)
    android_test_implementation: list[str] = field(default_factory=list)
    core_library_desugaring: list[str] = field(default_factory=list)

    def buckets(self) -> Iterator[tuple[str, list[str]]]:
        """Yield (bucket suffix, coordinates) pairs in declaration order."""
        for field_name, bucket_name in BUCKET_NAMES.items():
            yield bucket_name, getattr(self, field_name)


@dataclass
class FeatureToggle:
    """An optional feature: enabled flag plus feature-specific parameters."""

    enabled: Property[bool] = property_field("enabled", bool)


@dataclass
class KotlinSerialization(FeatureToggle):
    version: Property[str] = property_field("kotlin_serialization.version", str)
    json_enabled: Property[bool] = property_field("kotlin_serialization.json_enabled", bool)
    dependencies: list[str] = field(default_factory=list)


@dataclass
class CoreLibraryDesugaring(FeatureToggle):
    lib_version: Property[str] = property_field("core_library_desugaring.lib_version", str)


@dataclass
class Hilt(FeatureToggle):
    version: Property[str] = property_field("hilt.version", str)


@dataclass
class Room(FeatureToggle):
    version: Property[str] = property_field("room.version", str)
    schema_directory: Property[str] = property_field("room.schema_directory", str)


@dataclass
class Lint(FeatureToggle):
    xml_report: Property[bool] = property_field("lint.xml_report", bool)
    check_dependencies: Property[bool] = property_field("lint.check_dependencies", bool)


@dataclass
class BaselineProfile(FeatureToggle):
    """Performance profile generation, at module or build type level."""

    automatic_generation_during_build: Property[bool] = property_field(
        "baseline_profile.automatic_generation_during_build", bool
    )
    dependencies: list[str] = field(default_factory=list)


@dataclass
class Jacoco(FeatureToggle):
    version: Property[str] = property_field("jacoco.version", str)


@dataclass
class TestOptions:
    test_instrumentation_runner: Property[str] = property_field("testing.test_instrumentation_runner", str)
    include_android_resources: Property[bool] = property_field("testing.include_android_resources", bool)
    return_default_values: Property[bool] = property_field("testing.return_default_values", bool)


@dataclass
class Testing:
    test_options: TestOptions = field(default_factory=TestOptions)
    jacoco: Jacoco = field(default_factory=Jacoco)
    roborazzi: FeatureToggle = field(default_factory=FeatureToggle)


@dataclass
class BuildTypeModel:
    """Overrides for a single build variant."""

    name: str
    minify: FeatureToggle = field(default_factory=FeatureToggle)
    baseline_profile: BaselineProfile = field(default_factory=BaselineProfile)
    dependencies: DependencySpec = field(default_factory=DependencySpec)
    default_proguard_files: list[str] = field(default_factory=list)
    proguard_files: list[str] = field(default_factory=list)


@dataclass
class BuildTypes:
    """The fixed set of build variants."""

    debug: BuildTypeModel = field(default_factory=lambda: BuildTypeModel("debug"))
    release: BuildTypeModel = field(default_factory=lambda: BuildTypeModel("release"))

    def __iter__(self) -> Iterator[BuildTypeModel]:
        return (getattr(self, name) for name in VARIANT_NAMES)

    def get(self, name: str) -> BuildTypeModel:
        if name not in VARIANT_NAMES:
            raise KeyError(name)
        return getattr(self, name)


@dataclass
class SoftwareModel:
    """Root aggregate shared by every Android software type."""

    namespace: Property[str] = property_field("namespace", str)
    compile_sdk: Property[int] = property_field("compile_sdk", int)
    min_sdk: Property[int] = property_field("min_sdk", int)
    jdk_version: Property[int] = property_field("jdk_version", int)
    vector_drawables_use_support_library: Property[bool] = property_field(
        "vector_drawables_use_support_library", bool
    )

    build_types: BuildTypes = field(default_factory=BuildTypes)
    dependencies: DependencySpec = field(default_factory=DependencySpec)
    testing: Testing = field(default_factory=Testing)

    # Feature toggles
    kotlin_serialization: KotlinSerialization = field(default_factory=KotlinSerialization)
    core_library_desugaring: CoreLibraryDesugaring = field(default_factory=CoreLibraryDesugaring)
    hilt: Hilt = field(default_factory=Hilt)
    compose: FeatureToggle = field(default_factory=FeatureToggle)
    room: Room = field(default_factory=Room)
    licenses: FeatureToggle = field(default_factory=FeatureToggle)
    baseline_profile: BaselineProfile = field(default_factory=BaselineProfile)
    lint: Lint = field(default_factory=Lint)


@dataclass
class AndroidLibraryModel(SoftwareModel):
    """An Android library module."""

    nia: FeatureToggle = field(default_factory=FeatureToggle)


@dataclass
class AndroidApplicationModel(SoftwareModel):
    """An Android application module."""

    application_id: Property[str] = property_field("application_id", str)
    version_code: Property[int] = property_field("version_code", int)
    version_name: Property[str] = property_field("version_name", str)


def iter_properties(model: Any, prefix: str = "") -> Iterator[tuple[str, Property[Any]]]:
    """Walk a model and yield (dotted path, property) for every Property."""
    for f in fields(model):
        value = getattr(model, f.name)
        path = f"{prefix}{f.name}"
        if isinstance(value, Property):
            yield path, value
        elif is_dataclass(value):
            yield from iter_properties(value, f"{path}.")


def apply_values(model: Any, values: Mapping[str, Any], prefix: str = "") -> None:
    """Populate a model from a nested mapping.

    Property fields receive explicit values, list fields are extended in order
    and nested models recurse into sub-mappings.

    Raises:
        ValidationError: If a key is unknown or a value has the wrong shape.
    """
    known = {f.name for f in fields(model)}
    for key, value in values.items():
        path = f"{prefix}{key}"
        if key not in known:
            raise ValidationError(message="unknown model field", field_name=path)
        target = getattr(model, key)
        if isinstance(target, Property):
            if not target.accepts(value):
                expected = target.value_type.__name__ if target.value_type else "a value"
                raise ValidationError(
                    message=f"expected {expected}", field_name=path, context={"value": value}
                )
            target.set(value)
        elif isinstance(target, list):
            if not isinstance(value, list):
                raise ValidationError(
                    message="expected a list", field_name=path, context={"value": value}
                )
            target.extend(str(v) for v in value)
        elif is_dataclass(target):
            if not isinstance(value, Mapping):
                raise ValidationError(
                    message="expected a mapping", field_name=path, context={"value": value}
                )
            apply_values(target, value, f"{path}.")
        else:
            raise ValidationError(message="field is not configurable", field_name=path)
