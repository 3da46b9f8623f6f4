"""Android resource prefix derivation from project paths."""

from __future__ import annotations

import re
from collections.abc import Sequence


def split_project_path(path: str) -> list[str]:
    """Split a project path on non-word characters.

    ``":core:network"`` splits to ``["", "core", "network"]``: the leading
    separator yields an empty first segment. Trailing empty segments are
    dropped, so ``":core:"`` splits to ``["", "core"]``.
    """
    segments = re.split(r"\W+", path)
    while len(segments) > 1 and not segments[-1]:
        segments.pop()
    return segments


def build_resource_prefix(segments: Sequence[str] | str) -> str:
    """Build the resource prefix for a project.

    The first segment is dropped, the remaining segments are deduplicated
    (first occurrence wins) and joined with underscores, lowercased, and a
    trailing underscore is appended: resources in ``:core:module1`` must be
    prefixed with ``core_module1_``.

    Args:
        segments: Path segments, or a project path string to split.
    """
    if isinstance(segments, str):
        segments = split_project_path(segments)
    # NOTE: deduplication is inherited behavior; ":core:core" gives "core_"
    distinct = list(dict.fromkeys(segments[1:]))
    return "_".join(distinct).lower() + "_"
