"""Step executors, one per external tool."""

from .base import StepExecutor
from .image_compose import ImageComposeStep
from .narration import NarrationStep
from .video_mux import VideoMuxStep

__all__ = ["ImageComposeStep", "NarrationStep", "StepExecutor", "VideoMuxStep"]
