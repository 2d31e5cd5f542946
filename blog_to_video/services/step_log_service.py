"""Service for writing per-step execution logs."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Sequence

from blog_to_video.dto.execution_result import ExecutionResult
from blog_to_video.errors import OutputWriteError


class StepLogService:
    """Persist a command line and its stdout/stderr to disk."""

    def write_log(
        self, log_path: Path, command: Sequence[str], result: ExecutionResult
    ) -> None:
        """Write a structured log file with command, stdout and stderr sections."""
        content = "\n".join(
            [
                "[command]",
                subprocess.list2cmdline([str(part) for part in command]),
                f"exit code: {result.exit_code}",
                "",
                "[stdout]",
                result.stdout_text.strip(),
                "",
                "[stderr]",
                result.stderr_text.strip(),
            ]
        )
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            log_path.write_text(content + "\n", encoding="utf-8")
        except OSError as exc:
            raise OutputWriteError(log_path, exc) from exc
