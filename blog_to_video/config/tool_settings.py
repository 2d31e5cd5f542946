"""External tool configuration loaded from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

from .paths import AppPaths

DEFAULT_IMAGE_TOOL = "text-on-image"
DEFAULT_NARRATOR_TOOL = "blog-dub"
DEFAULT_MUXER_TOOL = "image-audio-to-video"

IMAGE_TOOL_ENV = "BLOG_TO_VIDEO_IMAGE_TOOL"
NARRATOR_TOOL_ENV = "BLOG_TO_VIDEO_NARRATOR_TOOL"
MUXER_TOOL_ENV = "BLOG_TO_VIDEO_MUXER_TOOL"
OUTPUT_ROOT_ENV = "BLOG_TO_VIDEO_OUTPUT_ROOT"


def _coerce_string(value: str | None) -> str | None:
    if value is None:
        return None
    text = value.strip()
    return text or None


@dataclass(frozen=True)
class ToolSettings:
    """Executable names of the collaborators plus the output location."""

    image_tool: str = DEFAULT_IMAGE_TOOL
    narrator_tool: str = DEFAULT_NARRATOR_TOOL
    muxer_tool: str = DEFAULT_MUXER_TOOL
    output_root: Path | None = None

    @property
    def paths(self) -> AppPaths:
        return AppPaths.from_output_root(self.output_root)

    @classmethod
    def from_mapping(cls, environ: Mapping[str, str]) -> "ToolSettings":
        """Build settings from an environment-like mapping."""
        output_root = _coerce_string(environ.get(OUTPUT_ROOT_ENV))
        return cls(
            image_tool=_coerce_string(environ.get(IMAGE_TOOL_ENV))
            or DEFAULT_IMAGE_TOOL,
            narrator_tool=_coerce_string(environ.get(NARRATOR_TOOL_ENV))
            or DEFAULT_NARRATOR_TOOL,
            muxer_tool=_coerce_string(environ.get(MUXER_TOOL_ENV))
            or DEFAULT_MUXER_TOOL,
            output_root=Path(output_root) if output_root else None,
        )

    @classmethod
    def from_env(cls) -> "ToolSettings":
        """Load ``.env`` from the working directory upwards, then read settings.

        Variables already set in the environment win over the file.
        """
        load_dotenv(find_dotenv(usecwd=True))
        return cls.from_mapping(os.environ)
