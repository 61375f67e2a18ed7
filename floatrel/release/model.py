from __future__ import annotations

from dataclasses import dataclass

from floatrel.release.semver import FloatingTargets, SemVer


@dataclass(frozen=True, slots=True)
class PublishResult:
    target: str
    created: bool
    uploaded: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class PropagationReport:
    source_tag: str
    version: SemVer
    targets: FloatingTargets
    published: tuple[PublishResult, ...]
    dry_run: bool = False
