"""DTO for the user-facing pipeline configuration."""

from __future__ import annotations

from dataclasses import dataclass

TTS_ENGINES = ("google", "openai")
DEFAULT_TTS_ENGINE = "google"


@dataclass(frozen=True)
class PipelineOptions:
    """Everything a run needs from the command line.

    Optional fields stay ``None`` when the user did not pass them; the
    command builders omit the matching flag entirely in that case.
    """

    url: str
    project_name: str
    header: str
    title: str
    image: str
    embed_thumb: str | None = None
    title_size: float | None = None
    title_offset_y: float | None = None
    title_line_spacing: float | None = None
    tts: str = DEFAULT_TTS_ENGINE
    debug: bool = False
    image_only: bool = False

    def __post_init__(self) -> None:
        if self.tts not in TTS_ENGINES:
            raise ValueError(
                f"Unknown TTS engine: {self.tts}. Choose from: {list(TTS_ENGINES)}"
            )
