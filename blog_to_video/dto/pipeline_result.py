"""DTOs for pipeline progress and outcome."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .run_context import RunContext


class PipelineState(str, Enum):
    """Controller states; the last two members of each branch are terminal."""

    INIT = "init"
    IMAGE_DONE = "image_done"
    IMAGE_ONLY_COMPLETE = "image_only_complete"
    NARRATION_DONE = "narration_done"
    VIDEO_DONE = "video_done"


@dataclass(frozen=True)
class PipelineResult:
    """Terminal state of a successful run and the artifacts it wrote."""

    state: PipelineState
    context: RunContext
    artifacts: tuple[Path, ...]

    @property
    def final_artifact(self) -> Path:
        return self.artifacts[-1]
