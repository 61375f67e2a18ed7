"""Scoped, per-run cache of downloaded release assets."""

from __future__ import annotations

import shutil
import signal
import tempfile
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from types import FrameType

__all__ = ["asset_cache", "list_asset_files"]


def _raise_on_sigterm(signum: int, frame: FrameType | None) -> None:
    del frame
    # 128 + SIGTERM, the status a shell reports for a terminated process.
    raise SystemExit(128 + signum)


@contextmanager
def _sigterm_as_exit() -> Iterator[None]:
    """Turn SIGTERM into SystemExit so enclosing ``finally`` blocks run.

    Signal handlers can only be installed from the main thread; elsewhere this
    is a no-op.
    """
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    previous = signal.signal(signal.SIGTERM, _raise_on_sigterm)
    try:
        yield
    finally:
        signal.signal(signal.SIGTERM, previous)


@contextmanager
def asset_cache(prefix: str = "floatrel-assets-") -> Iterator[Path]:
    """Yield a fresh empty temporary directory, removed on every exit path.

    Covers normal completion, errors, Ctrl-C (KeyboardInterrupt) and SIGTERM.
    """
    path = Path(tempfile.mkdtemp(prefix=prefix))
    try:
        with _sigterm_as_exit():
            yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)


def list_asset_files(directory: Path) -> list[Path]:
    """Regular files directly inside ``directory``, sorted by name.

    Subdirectories, symlinks and other special entries are skipped.
    """
    return sorted(p for p in directory.iterdir() if p.is_file() and not p.is_symlink())
