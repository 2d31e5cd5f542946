"""Error taxonomy for pipeline runs."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class PipelineError(Exception):
    """Base error for any fatal pipeline failure."""

    def __init__(self, message: str, stderr_text: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.stderr_text = stderr_text


class MissingInputFileError(PipelineError):
    """A user-supplied input path does not point to an existing file."""

    def __init__(self, label: str, path: Path) -> None:
        super().__init__(f"{label} not found: {path}")
        self.path = path


class InvalidProjectNameError(PipelineError):
    """Project name cannot be used as an output folder."""


class ExternalCommandError(PipelineError):
    """An external tool exited with a non-zero code."""

    def __init__(
        self, command: Sequence[str], exit_code: int, stderr_text: str
    ) -> None:
        super().__init__(
            f"{command[0]} exited with code {exit_code}",
            stderr_text=stderr_text,
        )
        self.command = list(command)
        self.exit_code = exit_code


class SpawnFailureError(PipelineError):
    """An external tool could not be started at all."""

    def __init__(self, command: Sequence[str], reason: OSError) -> None:
        super().__init__(f"Failed to start {command[0]}: {reason}")
        self.command = list(command)


class MissingOutputArtifactError(PipelineError):
    """A step reported success but its declared output is absent."""

    def __init__(self, step_name: str, path: Path) -> None:
        super().__init__(
            f"{step_name} finished without producing {path}"
        )
        self.path = path


class OutputWriteError(PipelineError):
    """An output directory or log file could not be written."""

    def __init__(self, path: Path, reason: OSError) -> None:
        super().__init__(f"Cannot write {path}: {reason.strerror or reason}")
        self.path = path
