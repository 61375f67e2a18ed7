from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from floatrel.core.config import RunConfig, load_config
from floatrel.output.console import ConsoleProtocol, RichConsole
from floatrel.release.gh import GhReleaseHost, ensure_gh_available
from floatrel.release.host import ReleaseHost

from .helpers import exit_on_error


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: RunConfig
    console: ConsoleProtocol
    host: ReleaseHost


def build_context(*, ref: str | None = None, repo: str | None = None) -> CLIContext:
    console = RichConsole()

    config_result = load_config(ref=ref, repo=repo)
    exit_on_error(config_result, console)
    config = config_result.unwrap()

    exit_on_error(ensure_gh_available(), console)

    return CLIContext(
        config=config,
        console=console,
        host=GhReleaseHost(cwd=Path.cwd(), repo=config.repo),
    )
