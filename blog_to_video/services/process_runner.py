"""Service for executing external tools."""

from __future__ import annotations

import io
import logging
import subprocess
import sys
import threading
from pathlib import Path
from typing import IO, Sequence, TextIO

from blog_to_video.dto.execution_result import ExecutionResult
from blog_to_video.errors import ExternalCommandError, SpawnFailureError
from blog_to_video.services.step_log_service import StepLogService

logger = logging.getLogger(__name__)


class ProcessRunner:
    """Run one external command, tee its output and collect it."""

    def __init__(
        self,
        log_service: StepLogService | None = None,
        stdout_sink: TextIO | None = None,
        stderr_sink: TextIO | None = None,
    ) -> None:
        self._log_service = log_service or StepLogService()
        self._stdout_sink = stdout_sink
        self._stderr_sink = stderr_sink

    def execute(self, command: Sequence[str]) -> ExecutionResult:
        """Execute the command and return collected stdout/stderr.

        Non-zero exit codes are returned, not raised. Line endings are kept
        as the child wrote them, so carriage-return progress output survives.
        """
        stdout_lines: list[str] = []
        stderr_lines: list[str] = []
        stdout_sink = self._stdout_sink or sys.stdout
        stderr_sink = self._stderr_sink or sys.stderr

        def _stream_reader(
            stream: IO[bytes], sink: TextIO, collector: list[str]
        ) -> None:
            reader = io.TextIOWrapper(
                stream, encoding="utf-8", errors="replace", newline=""
            )
            for line in iter(reader.readline, ""):
                collector.append(line)
                sink.write(line)
                sink.flush()

        argv = [str(part) for part in command]
        logger.debug("Spawning: %s", subprocess.list2cmdline(argv))
        try:
            process = subprocess.Popen(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as exc:
            raise SpawnFailureError(argv, exc) from exc

        with process:
            if process.stdout is None or process.stderr is None:
                raise RuntimeError("Failed to attach to command output streams.")

            stdout_thread = threading.Thread(
                target=_stream_reader,
                args=(process.stdout, stdout_sink, stdout_lines),
            )
            stderr_thread = threading.Thread(
                target=_stream_reader,
                args=(process.stderr, stderr_sink, stderr_lines),
            )
            stdout_thread.start()
            stderr_thread.start()
            return_code = process.wait()
            stdout_thread.join()
            stderr_thread.join()

        logger.debug("%s exited with code %s", argv[0], return_code)
        return ExecutionResult(
            exit_code=return_code,
            stdout_text="".join(stdout_lines),
            stderr_text="".join(stderr_lines),
        )

    def run(
        self,
        command: Sequence[str],
        log_path: Path | None = None,
    ) -> ExecutionResult:
        """Execute the command and raise ``ExternalCommandError`` on failure.

        When ``log_path`` is given the captured output is written there
        whether or not the command succeeded.
        """
        result = self.execute(command)
        if log_path is not None:
            self._log_service.write_log(log_path, command, result)
        if result.exit_code != 0:
            raise ExternalCommandError(
                [str(part) for part in command], result.exit_code, result.stderr_text
            )
        return result
