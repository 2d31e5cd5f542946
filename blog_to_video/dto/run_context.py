"""DTO that defines a planned pipeline run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RunContext:
    """Immutable paths and identifiers for a single pipeline run."""

    project_name: str
    timestamp: str
    base_output_dir: Path
    background_image: str
    image_path: Path
    audio_path: Path
    text_path: Path
    video_path: Path
    debug_dir: Path | None = None
    embed_thumb: str | None = None
