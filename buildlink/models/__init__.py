"""
buildlink data models.

The declarative property graph describing a software module: lazily-valued
properties, per-variant overrides, dependency buckets and feature toggles.
"""

from .jvm import JvmDependencies, JvmTesting, SpringApplicationModel
from .property import Property, if_present, property_field
from .software import (
    BUCKET_NAMES,
    VARIANT_NAMES,
    AndroidApplicationModel,
    AndroidLibraryModel,
    BaselineProfile,
    BuildTypeModel,
    BuildTypes,
    CoreLibraryDesugaring,
    DependencySpec,
    FeatureToggle,
    Hilt,
    Jacoco,
    KotlinSerialization,
    Lint,
    Room,
    SoftwareModel,
    Testing,
    TestOptions,
    apply_values,
    iter_properties,
)

__all__ = [
    "JvmDependencies",
    "JvmTesting",
    "SpringApplicationModel",
    "Property",
    "if_present",
    "property_field",
    "BUCKET_NAMES",
    "VARIANT_NAMES",
    "AndroidApplicationModel",
    "AndroidLibraryModel",
    "BaselineProfile",
    "BuildTypeModel",
    "BuildTypes",
    "CoreLibraryDesugaring",
    "DependencySpec",
    "FeatureToggle",
    "Hilt",
    "Jacoco",
    "KotlinSerialization",
    "Lint",
    "Room",
    "SoftwareModel",
    "Testing",
    "TestOptions",
    "apply_values",
    "iter_properties",
]
