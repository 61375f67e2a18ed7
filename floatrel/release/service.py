from __future__ import annotations

from floatrel.core.result import Err, Ok, Result
from floatrel.output.console import ConsoleProtocol, Style
from floatrel.release.assets import asset_cache, list_asset_files
from floatrel.release.errors import ReleaseError
from floatrel.release.host import ReleaseHost
from floatrel.release.model import PropagationReport, PublishResult
from floatrel.release.publisher import publish_to_target
from floatrel.release.semver import floating_targets, parse_version_tag, tag_from_ref


def propagate(
    *,
    ref: str,
    host: ReleaseHost,
    console: ConsoleProtocol,
    dry_run: bool = False,
) -> Result[PropagationReport, ReleaseError]:
    """Copy the assets of the release named by ``ref`` to its floating releases.

    The tag is parsed before any host call, so a malformed reference never
    reaches the release host. Targets are published major line first; the
    first error stops the run.
    """
    tag = tag_from_ref(ref)
    if isinstance(tag, Err):
        return tag
    source_tag = tag.value

    version = parse_version_tag(source_tag)
    if isinstance(version, Err):
        return version

    targets = floating_targets(version.value)
    console.print(f"source: {source_tag} (version {version.value})", Style.DIM)
    console.print(f"targets: {targets.major}, {targets.minor}", Style.DIM)

    published: list[PublishResult] = []
    with asset_cache() as cache_dir:
        downloaded = host.download_assets(source_tag, cache_dir)
        if isinstance(downloaded, Err):
            return downloaded

        assets = list_asset_files(cache_dir)
        console.info(f"downloaded {len(assets)} asset(s) from {source_tag}")

        for target in targets:
            result = publish_to_target(
                host,
                target,
                assets,
                source_tag=source_tag,
                console=console,
                dry_run=dry_run,
            )
            if isinstance(result, Err):
                return result
            published.append(result.value)

    return Ok(
        PropagationReport(
            source_tag=source_tag,
            version=version.value,
            targets=targets,
            published=tuple(published),
            dry_run=dry_run,
        )
    )
