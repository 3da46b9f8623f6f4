"""
Deferred link driver.

Sequences a configuration pass in two phases. At apply time conventions are
installed and a callback is registered with the host. When the host signals
that configuration is complete, the now-final model is linked exactly once:

1. toolchain and compatibility projection
2. prerequisite plugins of enabled features
3. build variants
4. features, in catalog order
5. root dependency buckets

Prerequisite plugins are applied ahead of the variants because some of them
register per-variant extensions. The first error aborts the pass. Host
mutations already made are kept.
"""

from __future__ import annotations

from typing import Any, Callable

from ..core.config import ConventionDefaults
from ..core.exceptions import BuildLinkError, LinkPhaseError
from ..core.logging import bind_link_pass, clear_link_pass, get_logger
from ..core.types import LinkReport, LinkState
from ..host.interface import HostProject
from .context import LinkContext
from .conventions import ConventionResolver
from .features import FEATURES, FeatureRegistry
from .toolchain import link_toolchain
from .variants import VariantLinker

logger = get_logger(__name__)


class DeferredLinkDriver:
    """Drives a software model through Created -> Configuring -> Linked."""

    def __init__(
        self,
        project: HostProject,
        model: Any,
        registry: FeatureRegistry | None = None,
        defaults: ConventionDefaults | None = None,
    ) -> None:
        """Initialize the driver.

        Args:
            project: Host project to link onto.
            model: The model owned by this configuration pass.
            registry: Feature catalog. Uses the built-in catalog if not provided.
            defaults: Convention values. Uses built-in defaults if not provided.
        """
        self.project = project
        self.model = model
        self.registry = registry or FEATURES
        self.defaults = defaults or ConventionDefaults()
        self.report: LinkReport | None = None
        self._state: LinkState | None = None

    @property
    def state(self) -> LinkState | None:
        return self._state

    def apply(self) -> None:
        """Install conventions and defer linking to the host's completion signal."""
        if self._state is not None:
            raise LinkPhaseError(message="driver already applied", state=self._state.value)
        self.install_conventions()
        self.project.after_evaluate(self.link)
        self._state = LinkState.CREATED
        logger.debug("Link deferred", project=self.project.path)

    def install_conventions(self) -> None:
        ConventionResolver(self.defaults).resolve(self.model)

    def configure(self, action: Callable[[Any], object]) -> None:
        """Run a caller action against the model before linking.

        Raises:
            LinkPhaseError: If the model has already been linked.
        """
        if self._state not in (LinkState.CREATED, LinkState.CONFIGURING):
            raise LinkPhaseError(
                message="model can only be configured between apply and link",
                state=self._state.value if self._state else "unapplied",
            )
        self._state = LinkState.CONFIGURING
        action(self.model)

    def run_steps(self, ctx: LinkContext) -> None:
        """Run the linking steps of one pass, in order."""
        link_toolchain(ctx)
        self.registry.apply_prerequisites(ctx)
        VariantLinker(ctx).link_all()
        self.registry.activate_all(ctx)
        ctx.merger.merge(self.model.dependencies)

    def link(self) -> LinkReport:
        """Link the final model onto the host. Runs at most once.

        Raises:
            LinkPhaseError: If linking was already triggered.
            BuildLinkError: The first error raised by a linking step. Errors
                outside the BuildLinkError hierarchy are wrapped, with the
                original kept as ``cause``.
        """
        if self._state not in (LinkState.CREATED, LinkState.CONFIGURING):
            raise LinkPhaseError(
                message="link phase cannot be re-triggered",
                state=self._state.value if self._state else "unapplied",
                context={"project": self.project.path},
            )
        self._transition(LinkState.LINKING)
        report = LinkReport(project_path=self.project.path)
        self.report = report
        ctx = LinkContext(self.project, self.model, report, self.defaults)

        try:
            self.run_steps(ctx)
        except Exception as e:
            error = e
            if not isinstance(e, BuildLinkError):
                error = BuildLinkError(
                    message=f"unexpected {type(e).__name__} while linking",
                    context={"project": self.project.path},
                    cause=e,
                )
            self._transition(LinkState.FAILED)
            report.mark_failed(str(error))
            logger.error("Link failed", error=str(error))
            if error is e:
                raise
            raise error from e
        else:
            self._transition(LinkState.LINKED)
            report.mark_linked()
            logger.info(
                "Link completed",
                features=report.activated_features,
                buckets=len(report.merged_buckets),
            )
        finally:
            clear_link_pass()
        return report

    def _transition(self, state: LinkState) -> None:
        self._state = state
        bind_link_pass(self.project.path, state.value)
