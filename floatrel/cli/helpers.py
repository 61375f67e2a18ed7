"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TypeVar

import typer

from floatrel.core.errors import ErrorCode
from floatrel.core.result import Err, Result
from floatrel.output.console import ConsoleProtocol

T = TypeVar("T")
E = TypeVar("E")


def exit_on_error(
    result: Result[T, E],
    console: ConsoleProtocol,
    error_code: ErrorCode = ErrorCode.FAILURE,
) -> None:
    """Print the error and exit if result is Err, otherwise return.

    Expects error objects to have 'message' and optional 'hint' attributes.
    """
    if isinstance(result, Err):
        error = result.error
        message: str = getattr(error, "message", str(error))
        hint: str | None = getattr(error, "hint", None)
        console.error(message)
        if hint:
            console.hint(hint)
        raise typer.Exit(code=int(error_code))
