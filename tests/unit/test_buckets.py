"""Unit tests for dependency bucket merging."""

import pytest

from buildlink.core.exceptions import BucketNotFoundError
from buildlink.core.types import LinkReport
from buildlink.linking.buckets import DependencyBucketMerger, bucket_name
from buildlink.models.software import DependencySpec


class TestBucketName:
    """Tests for host bucket naming."""

    def test_root_names_are_verbatim(self):
        assert bucket_name("implementation") == "implementation"
        assert bucket_name("compileOnly", None) == "compileOnly"

    @pytest.mark.parametrize(
        "variant,suffix,expected",
        [
            ("debug", "implementation", "debugImplementation"),
            ("release", "compileOnly", "releaseCompileOnly"),
            ("debug", "androidTestImplementation", "debugAndroidTestImplementation"),
        ],
    )
    def test_variant_names_capitalize_first_letter_only(self, variant, suffix, expected):
        """Test variant prefixing keeps the suffix's inner casing."""
        assert bucket_name(suffix, variant) == expected


class TestDependencyBucketMerger:
    """Tests for binding model buckets onto host buckets."""

    def test_merges_root_buckets_in_order(self, android_project):
        """Test root merge.

        Verifies that coordinates are appended in insertion order, including
        duplicates, and that empty buckets are skipped.
        """
        spec = DependencySpec(
            implementation=["a:b:1", "c:d:2", "a:b:1"],
            test_implementation=["junit:junit:4.13.2"],
        )
        merged = DependencyBucketMerger(android_project).merge(spec)

        assert merged == {
            "implementation": ["a:b:1", "c:d:2", "a:b:1"],
            "testImplementation": ["junit:junit:4.13.2"],
        }
        assert android_project.buckets["implementation"].coordinates == ["a:b:1", "c:d:2", "a:b:1"]
        assert android_project.buckets["compileOnly"].coordinates == []

    def test_merges_variant_buckets(self, android_project):
        """Test variant-scoped merge uses prefixed bucket names."""
        spec = DependencySpec(runtime_only=["x:y:1"], compile_only=["p:q:2"])
        DependencyBucketMerger(android_project).merge(spec, variant="release")

        assert android_project.buckets["releaseRuntimeOnly"].coordinates == ["x:y:1"]
        assert android_project.buckets["releaseCompileOnly"].coordinates == ["p:q:2"]
        assert android_project.buckets["runtimeOnly"].coordinates == []

    def test_appends_to_existing_coordinates(self, android_project):
        """Test that merging never replaces what the host already holds."""
        android_project.buckets["implementation"].add_all(["host:dep:1"])
        DependencyBucketMerger(android_project).merge(DependencySpec(implementation=["a:b:1"]))
        assert android_project.buckets["implementation"].coordinates == ["host:dep:1", "a:b:1"]

    def test_missing_bucket_is_fatal(self, project):
        """Test bind-only behavior.

        Verifies that merging into a host that has not created its standard
        buckets fails and creates nothing.
        """
        merger = DependencyBucketMerger(project)
        with pytest.raises(BucketNotFoundError) as exc_info:
            merger.merge(DependencySpec(implementation=["a:b:1"]), variant="debug")

        assert exc_info.value.bucket_name == "debugImplementation"
        assert project.buckets == {}

    def test_empty_spec_needs_no_buckets(self, project):
        """Test that an empty dependency declaration touches no host bucket."""
        assert DependencyBucketMerger(project).merge(DependencySpec()) == {}

    def test_records_merges_in_report(self, android_project):
        """Test that merges are recorded on the link report."""
        report = LinkReport(project_path=android_project.path)
        merger = DependencyBucketMerger(android_project, report)
        merger.merge(DependencySpec(implementation=["a:b:1"]))
        merger.add("implementation", ["c:d:2"])

        assert report.merged_buckets == {"implementation": ["a:b:1", "c:d:2"]}
