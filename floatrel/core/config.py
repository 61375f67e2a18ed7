"""Run configuration resolved from the environment.

The release reference comes from ``FLOATREL_REF`` when set, otherwise from
``GITHUB_REF`` (as provided by GitHub Actions on tag pushes). The target
repository defaults to ``GITHUB_REPOSITORY``; when neither it nor ``--repo`` is
given, ``gh`` resolves the repository from the current checkout.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .result import Err, Ok, Result

__all__ = [
    "REF_ENV",
    "REF_OVERRIDE_ENV",
    "REPO_ENV",
    "ConfigError",
    "RunConfig",
    "load_config",
]

REF_ENV = "GITHUB_REF"
REF_OVERRIDE_ENV = "FLOATREL_REF"
REPO_ENV = "GITHUB_REPOSITORY"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when the run configuration is incomplete."""

    message: str
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Inputs of a single propagation run."""

    ref: str
    repo: str | None = None


def _get_env(environ: Mapping[str, str], key: str) -> str | None:
    """Return a stripped env value, or None if missing or blank."""
    value = environ.get(key)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


def load_config(
    environ: Mapping[str, str] | None = None,
    *,
    ref: str | None = None,
    repo: str | None = None,
) -> Result[RunConfig, ConfigError]:
    """Resolve the run configuration.

    Explicit ``ref``/``repo`` arguments win over the environment, and
    ``FLOATREL_REF`` wins over ``GITHUB_REF``.

    Args:
        environ: Environment mapping (defaults to ``os.environ``).
        ref: Explicit release reference, e.g. ``refs/tags/v1.2.3``.
        repo: Explicit ``OWNER/NAME`` repository.

    Returns:
        Ok(RunConfig) or Err(ConfigError) when no reference is available.
    """
    env = os.environ if environ is None else environ

    resolved_ref = _clean(ref) or _get_env(env, REF_OVERRIDE_ENV) or _get_env(env, REF_ENV)
    if resolved_ref is None:
        return Err(
            ConfigError(
                message="no release reference provided",
                hint=f"set {REF_OVERRIDE_ENV} or {REF_ENV} (e.g. refs/tags/v1.2.3), or pass --ref",
            )
        )

    resolved_repo = _clean(repo) or _get_env(env, REPO_ENV)
    return Ok(RunConfig(ref=resolved_ref, repo=resolved_repo))
