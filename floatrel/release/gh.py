from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path

from floatrel.core.result import Err, Ok, Result
from floatrel.platform.process import ProcessError
from floatrel.platform.process import run as run_process
from floatrel.release.errors import ReleaseError, ReleaseErrorKind

_NOT_FOUND_MARKER = "release not found"
_NO_ASSETS_MARKER = "no assets to download"


def ensure_gh_available() -> Result[None, ReleaseError]:
    if shutil.which("gh") is None:
        return Err(
            ReleaseError(
                kind="gh_missing",
                message="gh: missing",
                hint="Install GitHub CLI: https://cli.github.com/",
            )
        )
    return Ok(None)


def _output_text(error: ProcessError) -> str:
    return f"{error.stderr}\n{error.stdout}".lower()


def _gh_error(error: ProcessError, *, kind: ReleaseErrorKind, message: str) -> ReleaseError:
    return ReleaseError(kind=kind, message=message, hint=error.stderr.strip() or str(error))


@dataclass(frozen=True, slots=True)
class GhReleaseHost:
    """ReleaseHost backed by ``gh release`` subcommands.

    No timeout or retry is applied here; both are left to ``gh``.
    """

    cwd: Path
    repo: str | None = None

    def _cmd(self, *args: str) -> list[str]:
        cmd = ["gh", "release", *args]
        if self.repo:
            cmd.extend(["--repo", self.repo])
        return cmd

    def download_assets(self, tag: str, dest: Path) -> Result[None, ReleaseError]:
        result = run_process(self._cmd("download", tag, "--dir", str(dest)), cwd=self.cwd)
        if isinstance(result, Err):
            # A release without assets is valid; there is simply nothing to copy.
            if _NO_ASSETS_MARKER in _output_text(result.error):
                return Ok(None)
            return Err(
                _gh_error(
                    result.error,
                    kind="download_failed",
                    message=f"failed to download assets of release {tag}",
                )
            )
        return Ok(None)

    def release_exists(self, tag: str) -> Result[bool, ReleaseError]:
        result = run_process(self._cmd("view", tag), cwd=self.cwd)
        if isinstance(result, Ok):
            return Ok(True)

        if _NOT_FOUND_MARKER in _output_text(result.error):
            return Ok(False)
        return Err(
            _gh_error(
                result.error,
                kind="view_failed",
                message=f"failed to query release {tag}",
            )
        )

    def create_release(self, tag: str, *, title: str, notes: str) -> Result[None, ReleaseError]:
        result = run_process(
            self._cmd("create", tag, "--title", title, "--notes", notes),
            cwd=self.cwd,
        )
        if isinstance(result, Err):
            return Err(
                _gh_error(
                    result.error,
                    kind="create_failed",
                    message=f"failed to create release {tag}",
                )
            )
        return Ok(None)

    def upload_asset(self, tag: str, path: Path, *, clobber: bool) -> Result[None, ReleaseError]:
        args = ["upload", tag, str(path)]
        if clobber:
            args.append("--clobber")
        result = run_process(self._cmd(*args), cwd=self.cwd)
        if isinstance(result, Err):
            return Err(
                _gh_error(
                    result.error,
                    kind="upload_failed",
                    message=f"failed to upload {path.name} to release {tag}",
                )
            )
        return Ok(None)
