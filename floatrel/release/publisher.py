from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from floatrel.core.result import Err, Ok, Result
from floatrel.output.console import ConsoleProtocol, Style
from floatrel.release.errors import ReleaseError
from floatrel.release.host import ReleaseHost
from floatrel.release.model import PublishResult


def render_floating_notes(target: str, source_tag: str) -> str:
    lines: list[str] = []
    lines.append(f"Floating release for the {target} version line.")
    lines.append("")
    lines.append(
        "Assets are replaced by those of the latest matching release on every publish; "
        "assets no longer produced upstream are kept."
    )
    lines.append("")
    lines.append(f"Created from {source_tag}.")
    return "\n".join(lines)


def publish_to_target(
    host: ReleaseHost,
    target: str,
    assets: Sequence[Path],
    *,
    source_tag: str,
    console: ConsoleProtocol,
    dry_run: bool = False,
) -> Result[PublishResult, ReleaseError]:
    """Ensure release ``target`` exists, then upload ``assets`` with clobber.

    An existing release keeps its title and notes. The first failing call
    aborts; no further uploads are attempted.
    """
    console.header(f"Release {target}")

    exists = host.release_exists(target)
    if isinstance(exists, Err):
        return exists

    created = False
    if exists.value:
        console.print(f"{target}: exists", Style.DIM)
    elif dry_run:
        console.print(f"{target}: would create", Style.DIM)
        created = True
    else:
        result = host.create_release(
            target,
            title=target,
            notes=render_floating_notes(target, source_tag),
        )
        if isinstance(result, Err):
            return result
        console.success(f"{target}: created")
        created = True

    uploaded: list[str] = []
    for path in assets:
        if dry_run:
            console.print(f"would upload {path.name} -> {target}", Style.DIM)
            uploaded.append(path.name)
            continue

        result = host.upload_asset(target, path, clobber=True)
        if isinstance(result, Err):
            return result
        console.success(f"uploaded {path.name} -> {target}")
        uploaded.append(path.name)

    if not assets:
        console.warning(f"no assets to upload to {target}")

    return Ok(PublishResult(target=target, created=created, uploaded=tuple(uploaded)))
