from __future__ import annotations

from pathlib import Path

import pytest

from floatrel.core.result import Err, Ok
from floatrel.output.console import MockConsole
from floatrel.release import assets as assets_mod
from floatrel.release import service as service_mod
from floatrel.release.errors import ReleaseError
from floatrel.release.host import InMemoryReleaseHost
from floatrel.release.semver import FloatingTargets, SemVer
from floatrel.release.service import propagate

_SOURCE_ASSETS = {"app-linux": b"\x7fELF linux build", "app-darwin": b"\xcf\xfa darwin build"}


def _host_with_source(tag: str = "v2.5.1") -> InMemoryReleaseHost:
    host = InMemoryReleaseHost()
    host.add_release(tag, _SOURCE_ASSETS)
    return host


def test_creates_both_targets_with_identical_assets() -> None:
    host = _host_with_source()

    result = propagate(ref="refs/tags/v2.5.1", host=host, console=MockConsole())

    assert isinstance(result, Ok)
    report = result.value
    assert report.source_tag == "v2.5.1"
    assert report.version == SemVer(2, 5, 1)
    assert report.targets == FloatingTargets(major="2.x.x", minor="2.5.x")
    assert [p.target for p in report.published] == ["2.x.x", "2.5.x"]
    assert all(p.created for p in report.published)
    assert host.assets("2.x.x") == _SOURCE_ASSETS
    assert host.assets("2.5.x") == _SOURCE_ASSETS


def test_call_order_is_download_then_major_then_minor() -> None:
    host = _host_with_source()

    propagate(ref="refs/tags/v2.5.1", host=host, console=MockConsole())

    calls = [(c.op, c.tag) for c in host.calls]
    assert calls == [
        ("download", "v2.5.1"),
        ("view", "2.x.x"),
        ("create", "2.x.x"),
        ("upload", "2.x.x"),
        ("upload", "2.x.x"),
        ("view", "2.5.x"),
        ("create", "2.5.x"),
        ("upload", "2.5.x"),
        ("upload", "2.5.x"),
    ]


def test_unprefixed_tag_downloads_unmodified_tag() -> None:
    host = _host_with_source("2.5.1")

    result = propagate(ref="refs/tags/2.5.1", host=host, console=MockConsole())

    assert isinstance(result, Ok)
    assert host.calls[0].op == "download"
    assert host.calls[0].tag == "2.5.1"


def test_existing_target_keeps_unrelated_assets() -> None:
    host = _host_with_source()
    host.add_release("2.x.x", {"old-tool": b"legacy", "app-linux": b"stale"})

    result = propagate(ref="refs/tags/v2.5.1", host=host, console=MockConsole())

    assert isinstance(result, Ok)
    assert result.value.published[0].created is False
    assert host.assets("2.x.x") == {"old-tool": b"legacy", **_SOURCE_ASSETS}


def test_running_twice_is_idempotent() -> None:
    host = _host_with_source()
    propagate(ref="refs/tags/v2.5.1", host=host, console=MockConsole())
    first = {tag: host.assets(tag) for tag in ("2.x.x", "2.5.x")}

    result = propagate(ref="refs/tags/v2.5.1", host=host, console=MockConsole())

    assert isinstance(result, Ok)
    assert not any(p.created for p in result.value.published)
    assert {tag: host.assets(tag) for tag in ("2.x.x", "2.5.x")} == first


def test_newer_patch_overwrites_floating_assets() -> None:
    host = _host_with_source()
    propagate(ref="refs/tags/v2.5.1", host=host, console=MockConsole())
    host.add_release("v2.5.2", {"app-linux": b"patched"})

    propagate(ref="refs/tags/v2.5.2", host=host, console=MockConsole())

    assert host.assets("2.5.x") == {"app-linux": b"patched", "app-darwin": _SOURCE_ASSETS["app-darwin"]}


@pytest.mark.parametrize("ref", ["refs/tags/1.2", "refs/tags/a.b.c", "refs/tags/", "refs/tags/1.2.3.4", ""])
def test_malformed_reference_makes_no_host_calls(ref: str) -> None:
    host = _host_with_source()

    result = propagate(ref=ref, host=host, console=MockConsole())

    assert isinstance(result, Err)
    assert result.error.kind in {"invalid_tag", "missing_ref"}
    assert host.calls == []


def test_missing_source_release_fails_before_publishing() -> None:
    host = InMemoryReleaseHost()

    result = propagate(ref="refs/tags/v2.5.1", host=host, console=MockConsole())

    assert isinstance(result, Err)
    assert result.error.kind == "download_failed"
    assert host.ops() == ["download"]


def test_major_failure_skips_minor_target() -> None:
    error = ReleaseError(kind="upload_failed", message="failed to upload app-darwin")
    host = _host_with_source()
    host.failures[("upload", "2.x.x")] = error

    result = propagate(ref="refs/tags/v2.5.1", host=host, console=MockConsole())

    assert result == Err(error)
    assert all(c.tag != "2.5.x" for c in host.calls)


def test_cache_is_removed_on_success_and_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[Path] = []
    real_cache = assets_mod.asset_cache

    def tracking_cache(prefix: str = "floatrel-assets-"):
        cm = real_cache(prefix)

        class _Tracked:
            def __enter__(self) -> Path:
                path = cm.__enter__()
                seen.append(path)
                return path

            def __exit__(self, *exc: object) -> bool | None:
                return cm.__exit__(*exc)

        return _Tracked()

    monkeypatch.setattr(service_mod, "asset_cache", tracking_cache)

    host = _host_with_source()
    propagate(ref="refs/tags/v2.5.1", host=host, console=MockConsole())
    host.failures[("view", "2.x.x")] = ReleaseError(kind="view_failed", message="boom")
    propagate(ref="refs/tags/v2.5.1", host=host, console=MockConsole())

    assert len(seen) == 2
    assert not any(path.exists() for path in seen)


def test_dry_run_leaves_targets_untouched() -> None:
    host = _host_with_source()
    console = MockConsole()

    result = propagate(ref="refs/tags/v2.5.1", host=host, console=console, dry_run=True)

    assert isinstance(result, Ok)
    assert result.value.dry_run is True
    assert set(host.releases) == {"v2.5.1"}
    assert host.ops() == ["download", "view", "view"]


def test_reports_progress() -> None:
    console = MockConsole()

    propagate(ref="refs/tags/v2.5.1", host=_host_with_source(), console=console)

    assert console.find("source: v2.5.1 (version 2.5.1)")
    assert console.find("targets: 2.x.x, 2.5.x")
    assert console.find("info: downloaded 2 asset(s) from v2.5.1")
    assert console.find("OK uploaded app-linux -> 2.5.x")
