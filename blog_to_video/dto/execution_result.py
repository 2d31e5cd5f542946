"""DTO capturing external command output."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExecutionResult:
    """Return code and collected output from one external command."""

    exit_code: int
    stdout_text: str
    stderr_text: str
