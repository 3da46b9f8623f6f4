"""
Declarative model of a Spring Boot application.

A JVM application built with a single Java version: the main class, the main
source set's dependencies and a test suite that may run on its own Java
version.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from .property import Property, property_field
from .software import BUCKET_NAMES


@dataclass
class JvmDependencies:
    """Dependency buckets of one JVM source set."""

    implementation: list[str] = field(default_factory=list)
    compile_only: list[str] = field(default_factory=list)
    runtime_only: list[str] = field(default_factory=list)

    def buckets(self) -> Iterator[tuple[str, list[str]]]:
        for field_name in ("implementation", "compile_only", "runtime_only"):
            yield BUCKET_NAMES[field_name], getattr(self, field_name)


@dataclass
class JvmTesting:
    java_version: Property[int] = property_field("testing.java_version", int)
    dependencies: JvmDependencies = field(default_factory=JvmDependencies)


@dataclass
class SpringApplicationModel:
    """A Spring Boot application."""

    java_version: Property[int] = property_field("java_version", int)
    main_class: Property[str] = property_field("main_class", str)
    dependencies: JvmDependencies = field(default_factory=JvmDependencies)
    testing: JvmTesting = field(default_factory=JvmTesting)
