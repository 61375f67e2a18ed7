from __future__ import annotations

import typer

from floatrel import __version__
from floatrel.cli.context import build_context
from floatrel.cli.helpers import exit_on_error
from floatrel.core.errors import ErrorCode
from floatrel.output.console import Style
from floatrel.release.service import propagate

app = typer.Typer(
    add_completion=False,
    rich_markup_mode="rich",
    help="Publish a release's assets to its floating MAJOR.x.x and MAJOR.MINOR.x releases.",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=int(ErrorCode.OK))


@app.command()
def run(
    ref: str | None = typer.Option(
        None,
        "--ref",
        help="Release reference, e.g. refs/tags/v1.2.3 (default: $FLOATREL_REF, then $GITHUB_REF).",
    ),
    repo: str | None = typer.Option(
        None,
        "--repo",
        help="OWNER/NAME repository (default: $GITHUB_REPOSITORY, then the current checkout).",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Download and check releases, but do not create or upload anything.",
    ),
    version: bool = typer.Option(  # pyright: ignore[reportUnusedParameter]
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Propagate release assets to floating major/minor releases."""
    ctx = build_context(ref=ref, repo=repo)

    result = propagate(ref=ctx.config.ref, host=ctx.host, console=ctx.console, dry_run=dry_run)
    exit_on_error(result, ctx.console)
    report = result.unwrap()

    for published in report.published:
        state = "created" if published.created else "updated"
        ctx.console.print(
            f"{published.target}: {state}, {len(published.uploaded)} asset(s)", Style.DIM
        )
    suffix = " (dry run)" if report.dry_run else ""
    ctx.console.success(f"{report.source_tag} propagated to {', '.join(report.targets)}{suffix}")


def main() -> None:
    app()
