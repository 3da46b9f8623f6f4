"""
Build variant linking.

Fans the shared model out to the host's build types. Each variant is linked
independently of the others: its minify flag, its variant-prefixed dependency
buckets, its post-processing rule files and its performance profile.
"""

from __future__ import annotations

from ..core.logging import get_logger
from ..host import ids
from ..host.interface import HostVariant
from ..models.software import BuildTypeModel
from .context import LinkContext
from .features import configure_baseline_profile

logger = get_logger(__name__)


class VariantLinker:
    """Links each fixed build type model onto its host variant."""

    def __init__(self, ctx: LinkContext) -> None:
        self.ctx = ctx

    def link_all(self) -> list[str]:
        """Link every build type.

        Raises:
            VariantNotFoundError: If a build type has no host variant.
        """
        linked = []
        for model in self.ctx.model.build_types:
            self.link(self.ctx.project.variant(model.name), model)
            linked.append(model.name)
        return linked

    def link(self, variant: HostVariant, model: BuildTypeModel) -> None:
        """Link one build type model onto its host variant."""
        ctx = self.ctx
        variant.set_minify_enabled(model.minify.enabled.get())
        ctx.merger.merge(model.dependencies, variant=variant.name)

        # Host defaults first, then custom rule files, each in declared order
        for name in model.default_proguard_files:
            variant.proguard_file(ctx.project.default_proguard_file(name))
        for name in model.proguard_files:
            variant.proguard_file(name)

        extension = variant.find_extension(ids.BASELINE_PROFILE_EXTENSION)
        if extension is not None and model.baseline_profile.enabled.get():
            configure_baseline_profile(ctx, model.baseline_profile, extension)

        ctx.report.linked_variants.append(variant.name)
        logger.debug("Variant linked", variant=variant.name, minify=model.minify.enabled.get())
