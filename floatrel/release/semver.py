from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from floatrel.core.result import Err, Ok, Result
from floatrel.release.errors import ReleaseError

# Three plain decimal components; pre-release and build metadata are rejected.
_VERSION_RE = re.compile(r"(\d+)\.(\d+)\.(\d+)", re.ASCII)


@dataclass(frozen=True, slots=True, order=True)
class SemVer:
    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


@dataclass(frozen=True, slots=True)
class FloatingTargets:
    """Tags of the floating releases fed by one source release."""

    major: str
    minor: str

    def __iter__(self) -> Iterator[str]:
        # Major line is always published first.
        yield self.major
        yield self.minor


def tag_from_ref(ref: str) -> Result[str, ReleaseError]:
    """Return the tag of a reference such as ``refs/tags/v1.2.3``.

    The tag is the last ``/``-delimited segment; a bare tag is accepted as is.
    """
    if not ref.strip():
        return Err(ReleaseError(kind="missing_ref", message="release reference is empty"))

    tag = ref.strip().rsplit("/", 1)[-1]
    if not tag:
        return Err(
            ReleaseError(
                kind="invalid_tag",
                message=f"release reference has no tag: {ref!r}",
                hint="expected a reference like refs/tags/v1.2.3",
            )
        )
    return Ok(tag)


def parse_version_tag(tag: str) -> Result[SemVer, ReleaseError]:
    """Parse ``v1.2.3`` or ``1.2.3`` into a SemVer.

    Only one leading ``v`` is stripped. Anything other than exactly three
    dot-separated non-negative integers is rejected.
    """
    version = tag[1:] if tag.startswith("v") else tag
    m = _VERSION_RE.fullmatch(version)
    if m is None:
        return Err(
            ReleaseError(
                kind="invalid_tag",
                message=f"invalid version tag: {tag!r}",
                hint="expected MAJOR.MINOR.PATCH with an optional leading 'v' (e.g. v1.2.3)",
            )
        )
    return Ok(SemVer(int(m.group(1)), int(m.group(2)), int(m.group(3))))


def floating_targets(version: SemVer) -> FloatingTargets:
    return FloatingTargets(
        major=f"{version.major}.x.x",
        minor=f"{version.major}.{version.minor}.x",
    )
