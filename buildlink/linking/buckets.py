"""
Dependency bucket merging.

Binds the named dependency lists of a model onto the host's named buckets.
Root buckets are used by name; variant buckets are named
``<variant><CapitalizedSuffix>`` (``debugImplementation``). The merger never
creates buckets.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..core.logging import get_logger
from ..core.types import LinkReport
from ..host.interface import HostProject
from ..models.jvm import JvmDependencies
from ..models.software import DependencySpec

logger = get_logger(__name__)


def bucket_name(suffix: str, variant: str | None = None) -> str:
    """Return the host bucket name for a suffix, optionally variant-scoped."""
    if not variant:
        return suffix
    return variant + suffix[:1].upper() + suffix[1:]


class DependencyBucketMerger:
    """Appends model coordinates to host buckets, in order."""

    def __init__(self, project: HostProject, report: LinkReport | None = None) -> None:
        self.project = project
        self.report = report

    def add(self, bucket: str, coordinates: Iterable[str]) -> list[str]:
        """Append coordinates to a single host bucket.

        Raises:
            BucketNotFoundError: If the host has no bucket of that name.
        """
        coords = list(coordinates)
        if not coords:
            return coords
        self.project.bucket(bucket).add_all(coords)
        if self.report is not None:
            self.report.record_merge(bucket, coords)
        logger.debug("Bucket merged", bucket=bucket, count=len(coords))
        return coords

    def merge(
        self, spec: DependencySpec | JvmDependencies, variant: str | None = None
    ) -> dict[str, list[str]]:
        """Merge every non-empty bucket of a dependency spec.

        Args:
            spec: The model's dependency buckets.
            variant: Variant name for variant-prefixed buckets, or None for root.

        Returns:
            Host bucket name -> coordinates appended.
        """
        merged: dict[str, list[str]] = {}
        for suffix, coordinates in spec.buckets():
            if coordinates:
                name = bucket_name(suffix, variant)
                merged[name] = self.add(name, coordinates)
        return merged
