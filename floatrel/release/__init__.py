"""Floating release propagation."""

from .errors import ReleaseError
from .gh import GhReleaseHost, ensure_gh_available
from .host import InMemoryReleaseHost, ReleaseHost
from .model import PropagationReport, PublishResult
from .semver import FloatingTargets, SemVer, floating_targets, parse_version_tag, tag_from_ref
from .service import propagate

__all__ = [
    "FloatingTargets",
    "GhReleaseHost",
    "InMemoryReleaseHost",
    "PropagationReport",
    "PublishResult",
    "ReleaseError",
    "ReleaseHost",
    "SemVer",
    "ensure_gh_available",
    "floating_targets",
    "parse_version_tag",
    "propagate",
    "tag_from_ref",
]
