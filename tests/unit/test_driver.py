"""Unit tests for the deferred link driver and software plugins."""

import pytest

from buildlink.core.exceptions import (
    BuildLinkError,
    DuplicateExtensionError,
    LinkPhaseError,
    MissingPrerequisiteError,
)
from buildlink.core.types import LinkState
from buildlink.host import ids
from buildlink.linking.driver import DeferredLinkDriver
from buildlink.linking.toolchain import java_version
from buildlink.models.software import AndroidApplicationModel, AndroidLibraryModel
from buildlink.plugins.android import AndroidApplicationPlugin


class TestDeferredLinkDriver:
    """Tests for phase ordering and the link state machine."""

    def test_plugin_apply_defers_linking(self, library_driver, project):
        """Test the apply-time phase.

        Verifies that applying the plugin applies the host plugins, registers
        the model and installs conventions without linking anything yet.
        """
        assert library_driver.state == LinkState.CREATED
        assert project.plugins == [ids.ANDROID_LIBRARY, ids.KOTLIN_ANDROID]
        assert project.extensions["androidLibrary"] is library_driver.model
        assert library_driver.model.min_sdk.get() == 21
        assert project.extensions[ids.ANDROID_EXTENSION].default_config.min_sdk is None

    def test_link_on_configuration_complete(self, library_driver, project):
        """Test the deferred phase runs when the host signals completion."""

        def configure(model):
            model.namespace.set("com.example.network")
            model.compile_sdk.set(34)
            model.dependencies.implementation.append("com.squareup.okhttp3:okhttp:4.12.0")

        library_driver.configure(configure)
        assert library_driver.state == LinkState.CONFIGURING

        (report,) = project.evaluate()

        android = project.extensions[ids.ANDROID_EXTENSION]
        assert library_driver.state == LinkState.LINKED
        assert report.state == LinkState.LINKED
        assert android.namespace == "com.example.network"
        assert android.compile_sdk == 34
        assert android.default_config.min_sdk == 21
        assert project.buckets["implementation"].coordinates == ["com.squareup.okhttp3:okhttp:4.12.0"]

    def test_desugaring_follows_jdk_version(self, library_driver, project):
        """Test the JDK 17 desugaring scenario.

        Verifies that an explicit JDK 17 enables desugaring by convention and
        the library coordinate with the configured version is appended to
        the desugaring bucket at link time.
        """

        def configure(model):
            model.jdk_version.set(17)
            model.core_library_desugaring.lib_version.set("2.1.2")

        library_driver.configure(configure)
        project.evaluate()

        model = library_driver.model
        android = project.extensions[ids.ANDROID_EXTENSION]
        assert model.core_library_desugaring.enabled.get() is True
        assert project.buckets["coreLibraryDesugaring"].coordinates == [
            "com.android.tools:desugar_jdk_libs:2.1.2"
        ]
        assert android.compile_options.core_library_desugaring_enabled is True
        assert android.compile_options.source_compatibility == "VERSION_17"
        assert android.compile_options.target_compatibility == "VERSION_17"
        assert project.extensions[ids.KOTLIN_EXTENSION].jvm_toolchain == 17

    def test_feature_coordinates_merged_after_caller_coordinates(self, library_driver, project):
        """Test that features run before the root bucket merge."""

        def configure(model):
            model.dependencies.implementation.append("com.example:core:1.0")
            model.room.enabled.set(True)

        library_driver.configure(configure)
        project.evaluate()

        assert project.buckets["implementation"].coordinates == [
            "com.example:core:1.0",
            "androidx.room:room-runtime:2.6.1",
            "androidx.room:room-ktx:2.6.1",
        ]

    def test_retrigger_is_rejected(self, library_driver, project):
        """Test that the deferred phase runs exactly once."""
        project.evaluate()
        with pytest.raises(LinkPhaseError):
            project.evaluate()
        with pytest.raises(LinkPhaseError):
            library_driver.link()
        assert project.buckets["implementation"].coordinates == []

    def test_configure_after_link_is_rejected(self, library_driver, project):
        """Test that the model cannot be configured once linked."""
        project.evaluate()
        with pytest.raises(LinkPhaseError):
            library_driver.configure(lambda model: model.compose.enabled.set(True))

    def test_apply_twice_is_rejected(self, library_driver):
        """Test that a driver is applied once."""
        with pytest.raises(LinkPhaseError):
            library_driver.apply()

    def test_failure_aborts_and_is_terminal(self, project):
        """Test failure handling.

        Verifies that the first error aborts the pass, the report records the
        failure and linking cannot be re-triggered afterwards.
        """
        driver = DeferredLinkDriver(project, AndroidLibraryModel())
        driver.apply()

        with pytest.raises(MissingPrerequisiteError):
            project.evaluate()

        assert driver.state == LinkState.FAILED
        assert driver.report.state == LinkState.FAILED
        assert "android" in driver.report.error_message
        with pytest.raises(LinkPhaseError):
            driver.link()

    def test_unexpected_error_is_wrapped_and_terminal(self, library_driver, project):
        """Test failure handling for errors outside the BuildLinkError hierarchy.

        Verifies that a mistyped value set in code fails the pass with a
        BuildLinkError keeping the original error as its cause, and that the
        driver does not stay in the linking state.
        """
        library_driver.configure(lambda model: model.jdk_version.set("17"))

        with pytest.raises(BuildLinkError) as exc_info:
            project.evaluate()

        assert isinstance(exc_info.value.cause, TypeError)
        assert exc_info.value.__cause__ is exc_info.value.cause
        assert library_driver.state == LinkState.FAILED
        assert library_driver.report.state == LinkState.FAILED
        assert "unexpected TypeError" in library_driver.report.error_message
        with pytest.raises(LinkPhaseError):
            library_driver.link()

    def test_project_and_variant_baseline_profiles(self, library_driver, project):
        """Test baseline profiles enabled at both levels.

        Verifies that the profile plugin is applied before the variants are
        linked, so the release variant's own profile is configured alongside
        the project-level one.
        """

        def configure(model):
            model.baseline_profile.enabled.set(True)
            model.build_types.release.baseline_profile.enabled.set(True)
            model.build_types.release.baseline_profile.automatic_generation_during_build.set(True)

        library_driver.configure(configure)
        (report,) = project.evaluate()

        release = project.variant("release")
        debug = project.variant("debug")
        assert release.find_extension(ids.BASELINE_PROFILE_EXTENSION).automatic_generation_during_build is True
        assert debug.find_extension(ids.BASELINE_PROFILE_EXTENSION).automatic_generation_during_build is False
        assert project.extensions[ids.BASELINE_PROFILE_EXTENSION].automatic_generation_during_build is False
        assert project.plugins.count(ids.BASELINE_PROFILE) == 1
        assert report.activated_features == ["baseline_profile"]

    def test_missing_application_plugin_names_application_id(self, project):
        """Test that the diagnostic names the plugin expected for the model type."""
        driver = DeferredLinkDriver(project, AndroidApplicationModel())
        driver.apply()

        with pytest.raises(MissingPrerequisiteError) as exc_info:
            project.evaluate()

        assert exc_info.value.plugin_id == ids.ANDROID_APPLICATION

    def test_both_android_plugins_conflict(self, project):
        """Test that applying the application plugin over the library plugin fails.

        Verifies that the clash over the shared Android extension raises a
        DuplicateExtensionError naming the extension.
        """
        project.apply_plugin(ids.ANDROID_LIBRARY)

        with pytest.raises(DuplicateExtensionError) as exc_info:
            project.apply_plugin(ids.ANDROID_APPLICATION)

        assert isinstance(exc_info.value, BuildLinkError)
        assert exc_info.value.extension_name == ids.ANDROID_EXTENSION


class TestApplicationPlugin:
    """Tests for the application software type."""

    def test_application_identity_is_linked(self, project, config):
        """Test that application fields reach the host default config."""
        driver = AndroidApplicationPlugin(config).apply(project)

        def configure(model):
            model.application_id.set("com.example.app")
            model.version_code.set(7)
            model.version_name.set("1.2.0")
            model.testing.test_options.test_instrumentation_runner.set(
                "androidx.test.runner.AndroidJUnitRunner"
            )
            model.testing.test_options.include_android_resources.set(True)

        driver.configure(configure)
        project.evaluate()

        android = project.extensions[ids.ANDROID_EXTENSION]
        assert project.has_plugin(ids.ANDROID_APPLICATION)
        assert android.default_config.application_id == "com.example.app"
        assert android.default_config.version_code == 7
        assert android.default_config.version_name == "1.2.0"
        assert android.default_config.test_instrumentation_runner == "androidx.test.runner.AndroidJUnitRunner"
        assert android.unit_tests.include_android_resources is True
        assert android.unit_tests.return_default_values is False


class TestJavaVersion:
    """Tests for Java version constant names."""

    @pytest.mark.parametrize("jdk,expected", [(8, "VERSION_1_8"), (11, "VERSION_11"), (21, "VERSION_21")])
    def test_java_version(self, jdk, expected):
        assert java_version(jdk) == expected
