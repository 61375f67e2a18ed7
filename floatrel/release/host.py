"""Release-hosting capabilities used by the propagation pipeline.

The pipeline only needs four operations keyed by tag. GhReleaseHost
(floatrel.release.gh) implements them with the GitHub CLI; InMemoryReleaseHost
keeps releases in memory so the pipeline can be exercised without network.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Protocol

from floatrel.core.result import Err, Ok, Result
from floatrel.release.errors import ReleaseError

__all__ = ["HostCall", "InMemoryReleaseHost", "ReleaseHost"]

HostOp = Literal["download", "view", "create", "upload"]


class ReleaseHost(Protocol):
    def download_assets(self, tag: str, dest: Path) -> Result[None, ReleaseError]:
        """Materialize every asset of release ``tag`` into ``dest``."""
        ...

    def release_exists(self, tag: str) -> Result[bool, ReleaseError]: ...

    def create_release(self, tag: str, *, title: str, notes: str) -> Result[None, ReleaseError]: ...

    def upload_asset(self, tag: str, path: Path, *, clobber: bool) -> Result[None, ReleaseError]:
        """Attach ``path`` to release ``tag``, replacing a same-named asset if ``clobber``."""
        ...


@dataclass(frozen=True, slots=True)
class HostCall:
    op: HostOp
    tag: str
    detail: str | None = None


@dataclass(frozen=True, slots=True)
class _Release:
    title: str
    notes: str
    assets: dict[str, bytes]


def _empty_releases() -> dict[str, _Release]:
    return {}


def _empty_calls() -> list[HostCall]:
    return []


def _empty_failures() -> dict[tuple[HostOp, str], ReleaseError]:
    return {}


@dataclass
class InMemoryReleaseHost:
    """Release host backed by a dict, for tests and local dry experiments.

    ``failures`` maps ``(op, tag)`` to the error that call should return.
    """

    releases: dict[str, _Release] = field(default_factory=_empty_releases)
    calls: list[HostCall] = field(default_factory=_empty_calls)
    failures: dict[tuple[HostOp, str], ReleaseError] = field(default_factory=_empty_failures)

    def add_release(
        self,
        tag: str,
        assets: dict[str, bytes] | None = None,
        *,
        title: str | None = None,
        notes: str = "",
    ) -> None:
        self.releases[tag] = _Release(title=title or tag, notes=notes, assets=dict(assets or {}))

    def assets(self, tag: str) -> dict[str, bytes]:
        return dict(self.releases[tag].assets)

    def title(self, tag: str) -> str:
        return self.releases[tag].title

    def notes(self, tag: str) -> str:
        return self.releases[tag].notes

    def ops(self) -> list[HostOp]:
        return [c.op for c in self.calls]

    def _failure(self, op: HostOp, tag: str) -> Err[ReleaseError] | None:
        error = self.failures.get((op, tag))
        return Err(error) if error is not None else None

    def download_assets(self, tag: str, dest: Path) -> Result[None, ReleaseError]:
        self.calls.append(HostCall("download", tag, str(dest)))
        if (failed := self._failure("download", tag)) is not None:
            return failed

        release = self.releases.get(tag)
        if release is None:
            return Err(ReleaseError(kind="download_failed", message=f"release not found: {tag}"))

        for name, content in release.assets.items():
            (dest / name).write_bytes(content)
        return Ok(None)

    def release_exists(self, tag: str) -> Result[bool, ReleaseError]:
        self.calls.append(HostCall("view", tag))
        if (failed := self._failure("view", tag)) is not None:
            return failed
        return Ok(tag in self.releases)

    def create_release(self, tag: str, *, title: str, notes: str) -> Result[None, ReleaseError]:
        self.calls.append(HostCall("create", tag, title))
        if (failed := self._failure("create", tag)) is not None:
            return failed

        if tag in self.releases:
            return Err(ReleaseError(kind="create_failed", message=f"release already exists: {tag}"))
        self.add_release(tag, title=title, notes=notes)
        return Ok(None)

    def upload_asset(self, tag: str, path: Path, *, clobber: bool) -> Result[None, ReleaseError]:
        self.calls.append(HostCall("upload", tag, path.name))
        if (failed := self._failure("upload", tag)) is not None:
            return failed

        release = self.releases.get(tag)
        if release is None:
            return Err(ReleaseError(kind="upload_failed", message=f"release not found: {tag}"))
        if path.name in release.assets and not clobber:
            return Err(
                ReleaseError(
                    kind="upload_failed",
                    message=f"asset already exists: {tag}/{path.name}",
                )
            )

        release.assets[path.name] = path.read_bytes()
        return Ok(None)
