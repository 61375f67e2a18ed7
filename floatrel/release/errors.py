from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ReleaseErrorKind = Literal[
    "missing_ref",
    "invalid_tag",
    "gh_missing",
    "download_failed",
    "view_failed",
    "create_failed",
    "upload_failed",
]


@dataclass(frozen=True, slots=True)
class ReleaseError:
    kind: ReleaseErrorKind
    message: str
    hint: str | None = None
