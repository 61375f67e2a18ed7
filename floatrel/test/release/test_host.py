from __future__ import annotations

from pathlib import Path

from floatrel.core.result import Err, Ok
from floatrel.release.host import HostCall, InMemoryReleaseHost


def test_download_writes_assets(tmp_path: Path) -> None:
    host = InMemoryReleaseHost()
    host.add_release("v1.0.0", {"tool.tar.gz": b"archive"})

    assert host.download_assets("v1.0.0", tmp_path) == Ok(None)
    assert (tmp_path / "tool.tar.gz").read_bytes() == b"archive"
    assert host.calls == [HostCall("download", "v1.0.0", str(tmp_path))]


def test_upload_without_clobber_conflicts(tmp_path: Path) -> None:
    host = InMemoryReleaseHost()
    host.add_release("1.x.x", {"tool": b"old"})
    asset = tmp_path / "tool"
    asset.write_bytes(b"new")

    result = host.upload_asset("1.x.x", asset, clobber=False)
    assert isinstance(result, Err)
    assert result.error.kind == "upload_failed"
    assert host.assets("1.x.x") == {"tool": b"old"}

    assert host.upload_asset("1.x.x", asset, clobber=True) == Ok(None)
    assert host.assets("1.x.x") == {"tool": b"new"}


def test_create_existing_release_fails() -> None:
    host = InMemoryReleaseHost()
    host.add_release("1.x.x")

    result = host.create_release("1.x.x", title="1.x.x", notes="")
    assert isinstance(result, Err)
    assert result.error.kind == "create_failed"


def test_release_exists() -> None:
    host = InMemoryReleaseHost()
    host.add_release("1.x.x")

    assert host.release_exists("1.x.x") == Ok(True)
    assert host.release_exists("1.2.x") == Ok(False)
    assert host.ops() == ["view", "view"]
