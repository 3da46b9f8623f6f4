"""Linking of declarative software models onto the host build engine."""

from .binding import set_field
from .buckets import DependencyBucketMerger, bucket_name
from .context import LinkContext
from .conventions import ConventionResolver
from .driver import DeferredLinkDriver
from .features import FEATURES, Feature, FeatureRegistry
from .jvm import JvmLinkDriver, default_test_suite, link_spring_application
from .resources import build_resource_prefix, split_project_path
from .toolchain import java_version, link_toolchain
from .variants import VariantLinker

__all__ = [
    "set_field",
    "DependencyBucketMerger",
    "bucket_name",
    "LinkContext",
    "ConventionResolver",
    "DeferredLinkDriver",
    "FEATURES",
    "Feature",
    "FeatureRegistry",
    "JvmLinkDriver",
    "default_test_suite",
    "link_spring_application",
    "build_resource_prefix",
    "split_project_path",
    "java_version",
    "link_toolchain",
    "VariantLinker",
]
