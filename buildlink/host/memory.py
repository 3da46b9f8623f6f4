"""
In-memory host build engine.

Provides a self-contained implementation of the host interface, suitable for
tests and for dry-running a model from the command line. Host objects are
pydantic models with validated assignment, so setting an unknown field or a
value of the wrong type fails the same way a typed host setter would.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field

from ..core.exceptions import DuplicateExtensionError, MissingPrerequisiteError
from ..core.logging import get_logger
from ..models.software import BUCKET_NAMES, VARIANT_NAMES
from . import ids
from .interface import HostBucket, HostProject, HostVariant

logger = get_logger(__name__)


class HostObject(BaseModel):
    """Base for mutable host extension objects."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")


class DefaultConfig(HostObject):
    min_sdk: int | None = None
    target_sdk: int | None = None
    vector_drawables_use_support_library: bool | None = None
    test_instrumentation_runner: str | None = None
    application_id: str | None = None
    version_code: int | None = None
    version_name: str | None = None


class CompileOptions(HostObject):
    source_compatibility: str | None = None
    target_compatibility: str | None = None
    core_library_desugaring_enabled: bool = False


class UnitTestOptions(HostObject):
    include_android_resources: bool = False
    return_default_values: bool = False


class LintOptions(HostObject):
    xml_report: bool = False
    check_dependencies: bool = False


class BuildFeatures(HostObject):
    compose: bool = False


class ProductFlavor(HostObject):
    name: str
    dimension: str | None = None


class AndroidExtension(HostObject):
    """The Android plugin's common extension."""

    namespace: str | None = None
    compile_sdk: int | None = None
    resource_prefix: str | None = None
    default_config: DefaultConfig = Field(default_factory=DefaultConfig)
    compile_options: CompileOptions = Field(default_factory=CompileOptions)
    unit_tests: UnitTestOptions = Field(default_factory=UnitTestOptions)
    lint: LintOptions = Field(default_factory=LintOptions)
    build_features: BuildFeatures = Field(default_factory=BuildFeatures)
    flavor_dimensions: list[str] = Field(default_factory=list)
    product_flavors: dict[str, ProductFlavor] = Field(default_factory=dict)

    def create_flavor(self, name: str) -> ProductFlavor:
        flavor = self.product_flavors.get(name)
        if flavor is None:
            flavor = ProductFlavor(name=name)
            self.product_flavors[name] = flavor
        return flavor


class KotlinExtension(HostObject):
    jvm_toolchain: int | None = None
    jvm_target: str | None = None
    all_warnings_as_errors: bool = False
    free_compiler_args: list[str] = Field(default_factory=list)


class KspExtension(HostObject):
    args: dict[str, str] = Field(default_factory=dict)

    def arg(self, key: str, value: str) -> None:
        self.args[key] = value


class RoomExtension(HostObject):
    schema_directory: str | None = None


class BaselineProfileExtension(HostObject):
    automatic_generation_during_build: bool = False


class JacocoExtension(HostObject):
    tool_version: str | None = None


class JavaExtension(HostObject):
    toolchain_language_version: int | None = None


class ApplicationExtension(HostObject):
    main_class: str | None = None


class SpringBootExtension(HostObject):
    main_class: str | None = None


class JvmTestSuite(HostObject):
    name: str
    test_framework: str | None = None
    java_launcher_version: int | None = None

    def use_junit_jupiter(self) -> None:
        self.test_framework = "junit-jupiter"


class TestingExtension(HostObject):
    suites: dict[str, JvmTestSuite] = Field(default_factory=dict)


class MemoryBucket(HostBucket):
    """An ordered list of coordinates."""

    def __init__(self, name: str) -> None:
        self._name = name
        self.coordinates: list[str] = []

    @property
    def name(self) -> str:
        return self._name

    def add_all(self, coordinates: Iterable[str]) -> None:
        self.coordinates.extend(coordinates)


class MemoryBuildType(HostVariant):
    def __init__(self, name: str) -> None:
        self._name = name
        self.minify_enabled = False
        self._android_test_enabled = True
        self.proguard_files: list[Path | str] = []
        self.extensions: dict[str, Any] = {}

    @property
    def name(self) -> str:
        return self._name

    def set_minify_enabled(self, enabled: bool) -> None:
        self.minify_enabled = enabled

    @property
    def android_test_enabled(self) -> bool:
        return self._android_test_enabled

    def set_android_test_enabled(self, enabled: bool) -> None:
        self._android_test_enabled = enabled

    def proguard_file(self, rule_file: Path | str) -> None:
        self.proguard_files.append(rule_file)

    def find_extension(self, name: str) -> Any | None:
        return self.extensions.get(name)


def _variant_bucket(variant: str, suffix: str) -> str:
    return variant + suffix[:1].upper() + suffix[1:]


class MemoryHostProject(HostProject):
    """A host project kept entirely in memory."""

    def __init__(
        self,
        path: str = ":",
        properties: dict[str, str] | None = None,
        project_dir: Path | None = None,
        build_dir: Path | None = None,
    ) -> None:
        """Initialize the project.

        Args:
            path: Hierarchical project path.
            properties: Project properties visible through find_property.
            project_dir: Project directory. Defaults to the working directory.
            build_dir: Build directory used to resolve default rule files.
                Defaults to ``build`` under the project directory.
        """
        self._path = path
        self.properties = dict(properties or {})
        self._project_dir = project_dir or Path(".")
        self.build_dir = build_dir or self._project_dir / "build"
        self.plugins: list[str] = []
        self.buckets: dict[str, MemoryBucket] = {}
        self.extensions: dict[str, Any] = {}
        self.variants: dict[str, MemoryBuildType] = {}
        self._callbacks: list[Callable[[], object]] = []
        self._hooks: dict[str, Callable[[], None]] = {
            ids.ANDROID_LIBRARY: self._apply_android,
            ids.ANDROID_APPLICATION: self._apply_android,
            ids.KOTLIN_ANDROID: lambda: self.add_extension(ids.KOTLIN_EXTENSION, KotlinExtension()),
            ids.KSP: self._apply_ksp,
            ids.ROOM: lambda: self.add_extension(ids.ROOM_EXTENSION, RoomExtension()),
            ids.BASELINE_PROFILE: self._apply_baseline_profile,
            ids.JACOCO: lambda: self.add_extension(ids.JACOCO_EXTENSION, JacocoExtension()),
            ids.APPLICATION: self._apply_application,
            ids.SPRING_BOOT: lambda: self.add_extension(ids.SPRING_BOOT_EXTENSION, SpringBootExtension()),
        }

    @property
    def path(self) -> str:
        return self._path

    @property
    def project_dir(self) -> Path:
        return self._project_dir

    # Plugins

    def apply_plugin(self, plugin_id: str) -> bool:
        if plugin_id in self.plugins:
            logger.debug("Plugin already applied", plugin_id=plugin_id, project=self.path)
            return False
        self.plugins.append(plugin_id)
        hook = self._hooks.get(plugin_id)
        if hook is not None:
            hook()
        logger.debug("Plugin applied", plugin_id=plugin_id, project=self.path)
        return True

    def has_plugin(self, plugin_id: str) -> bool:
        return plugin_id in self.plugins

    def _apply_android(self) -> None:
        self.add_extension(ids.ANDROID_EXTENSION, AndroidExtension())
        for suffix in BUCKET_NAMES.values():
            self.create_bucket(suffix)
            for variant in VARIANT_NAMES:
                self.create_bucket(_variant_bucket(variant, suffix))
        for variant in VARIANT_NAMES:
            self.variants[variant] = MemoryBuildType(variant)

    def _apply_application(self) -> None:
        self.add_extension(ids.JAVA_EXTENSION, JavaExtension())
        self.add_extension(ids.APPLICATION_EXTENSION, ApplicationExtension())
        self.add_extension(
            ids.TESTING_EXTENSION, TestingExtension(suites={"test": JvmTestSuite(name="test")})
        )
        for suffix in ("implementation", "compileOnly", "runtimeOnly"):
            self.create_bucket(suffix)
            self.create_bucket(_variant_bucket("test", suffix))

    def _apply_ksp(self) -> None:
        self.add_extension(ids.KSP_EXTENSION, KspExtension())
        for name in ("ksp", "kspTest", "kspAndroidTest"):
            self.create_bucket(name)

    def _apply_baseline_profile(self) -> None:
        self.add_extension(ids.BASELINE_PROFILE_EXTENSION, BaselineProfileExtension())
        self.create_bucket("baselineProfile")
        for variant in self.variants.values():
            variant.extensions[ids.BASELINE_PROFILE_EXTENSION] = BaselineProfileExtension()

    # Buckets

    def create_bucket(self, name: str) -> MemoryBucket:
        bucket = self.buckets.get(name)
        if bucket is None:
            bucket = MemoryBucket(name)
            self.buckets[name] = bucket
        return bucket

    def find_bucket(self, name: str) -> MemoryBucket | None:
        return self.buckets.get(name)

    # Extensions

    def find_extension(self, name: str) -> Any | None:
        return self.extensions.get(name)

    def add_extension(self, name: str, extension: Any) -> None:
        if name in self.extensions:
            raise DuplicateExtensionError(
                message="extension names are unique per project",
                extension_name=name,
                context={"project": self.path, "plugins": list(self.plugins)},
            )
        self.extensions[name] = extension

    # Variants

    def find_variant(self, name: str) -> MemoryBuildType | None:
        return self.variants.get(name)

    def default_proguard_file(self, name: str) -> Path:
        if self.find_extension(ids.ANDROID_EXTENSION) is None:
            raise MissingPrerequisiteError(
                message="default rule files are provided by the Android plugin",
                plugin_id=ids.ANDROID_LIBRARY,
                extension_name=ids.ANDROID_EXTENSION,
            )
        return self.build_dir / "intermediates" / "default_proguard_files" / name

    # Lifecycle

    def after_evaluate(self, callback: Callable[[], object]) -> None:
        self._callbacks.append(callback)

    def evaluate(self) -> list[object]:
        """Fire the "configuration complete" signal.

        Returns:
            The results of each registered callback, in registration order.
        """
        return [callback() for callback in self._callbacks]

    def find_property(self, name: str) -> str | None:
        return self.properties.get(name)

    def snapshot(self) -> dict[str, Any]:
        """Dump the project state for display."""
        return {
            "path": self.path,
            "plugins": list(self.plugins),
            "buckets": {name: list(b.coordinates) for name, b in self.buckets.items() if b.coordinates},
            "extensions": {
                name: ext.model_dump(mode="json")
                for name, ext in self.extensions.items()
                if isinstance(ext, HostObject)
            },
            "variants": {
                name: {
                    "minify_enabled": v.minify_enabled,
                    "android_test_enabled": v.android_test_enabled,
                    "proguard_files": [str(f) for f in v.proguard_files],
                }
                for name, v in self.variants.items()
            },
        }
