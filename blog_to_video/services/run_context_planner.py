"""Service for planning output paths of a pipeline run."""

from __future__ import annotations

import logging
from pathlib import Path

from blog_to_video.dto.pipeline_options import PipelineOptions
from blog_to_video.dto.run_context import RunContext
from blog_to_video.errors import OutputWriteError
from blog_to_video.services.timestamp_factory import TimestampFactory
from blog_to_video.validators.input_path_validator import InputPathValidator

logger = logging.getLogger(__name__)


def _ensure_directory(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputWriteError(path, exc) from exc


class RunContextPlanner:
    """Create output directories and resolve every path a run touches."""

    def __init__(
        self,
        output_root: Path,
        timestamp_factory: TimestampFactory,
        path_validator: InputPathValidator,
    ) -> None:
        self._output_root = output_root
        self._timestamp_factory = timestamp_factory
        self._path_validator = path_validator

    def plan(self, options: PipelineOptions) -> RunContext:
        """Prepare directories and return the immutable run context.

        Directories are created before the user inputs are checked, so a
        missing background image still leaves ``outputs/<name>`` behind.
        """
        project_name = self._path_validator.safe_project_name(options.project_name)
        timestamp = self._timestamp_factory.create()

        base_output_dir = self._output_root / project_name
        _ensure_directory(base_output_dir)

        debug_dir = None
        if options.debug:
            debug_dir = base_output_dir / f"debug_{timestamp}"
            _ensure_directory(debug_dir)
            logger.debug("Debug directory ready at %s", debug_dir)

        background_image = self._path_validator.resolve_input_file(
            options.image, "Background image"
        )
        embed_thumb = None
        if options.embed_thumb:
            embed_thumb = self._path_validator.resolve_input_file(
                options.embed_thumb, "Embedded image"
            )

        return RunContext(
            project_name=project_name,
            timestamp=timestamp,
            base_output_dir=base_output_dir,
            background_image=background_image,
            embed_thumb=embed_thumb,
            image_path=base_output_dir / f"screen-{timestamp}.png",
            audio_path=base_output_dir / f"dub-{timestamp}.mp3",
            text_path=base_output_dir / f"script-{timestamp}.txt",
            video_path=base_output_dir / f"video-{timestamp}.mp4",
            debug_dir=debug_dir,
        )
