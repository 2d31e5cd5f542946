"""Use case that drives a full blog-to-video run."""

from __future__ import annotations

import logging
from pathlib import Path

from blog_to_video.config.tool_settings import ToolSettings
from blog_to_video.dto.pipeline_options import PipelineOptions
from blog_to_video.dto.pipeline_result import PipelineResult, PipelineState
from blog_to_video.services.process_runner import ProcessRunner
from blog_to_video.services.run_context_planner import RunContextPlanner
from blog_to_video.services.timestamp_factory import TimestampFactory
from blog_to_video.steps.image_compose import ImageComposeStep
from blog_to_video.steps.narration import NarrationStep
from blog_to_video.steps.video_mux import VideoMuxStep
from blog_to_video.validators.input_path_validator import InputPathValidator

logger = logging.getLogger(__name__)


class RunBlogToVideoUseCase:
    """Sequence image, narration and mux steps for one article.

    Steps run strictly one after another. The first failure propagates to
    the caller and whatever was already written stays on disk.
    """

    def __init__(
        self,
        planner: RunContextPlanner,
        image_step: ImageComposeStep,
        narration_step: NarrationStep,
        mux_step: VideoMuxStep,
    ) -> None:
        self._planner = planner
        self._image_step = image_step
        self._narration_step = narration_step
        self._mux_step = mux_step
        self.state = PipelineState.INIT

    @classmethod
    def from_settings(
        cls,
        settings: ToolSettings,
        runner: ProcessRunner | None = None,
        cwd: Path | None = None,
    ) -> "RunBlogToVideoUseCase":
        """Wire the default collaborators for the configured tools."""
        runner = runner or ProcessRunner()
        planner = RunContextPlanner(
            output_root=settings.paths.output_root,
            timestamp_factory=TimestampFactory(),
            path_validator=InputPathValidator(cwd=cwd),
        )
        return cls(
            planner=planner,
            image_step=ImageComposeStep(runner, settings.image_tool),
            narration_step=NarrationStep(runner, settings.narrator_tool),
            mux_step=VideoMuxStep(runner, settings.muxer_tool),
        )

    def execute(self, options: PipelineOptions) -> PipelineResult:
        """Run the pipeline and return the terminal state with its artifacts."""
        self.state = PipelineState.INIT
        context = self._planner.plan(options)

        print(f'[pipeline] project "{context.project_name}" ({context.timestamp})')
        print(f"[pipeline] output dir -> {context.base_output_dir}")
        print(f"[pipeline] background image: {context.background_image}")
        if context.embed_thumb:
            print(f"[pipeline] embedded image: {context.embed_thumb}")
        if context.debug_dir is not None:
            print(f"[pipeline] debug dir -> {context.debug_dir}")

        total = 1 if options.image_only else 3

        print(f"[pipeline] step1/{total} composing title image")
        self._image_step.run(context, options)
        self.state = PipelineState.IMAGE_DONE
        print(f"[pipeline] step1 image -> {context.image_path}")

        if options.image_only:
            self.state = PipelineState.IMAGE_ONLY_COMPLETE
            logger.info("Image-only run finished for %s", context.project_name)
            return PipelineResult(
                state=self.state,
                context=context,
                artifacts=(context.image_path,),
            )

        print(f"[pipeline] step2/{total} narrating article ({options.tts})")
        self._narration_step.run(context, options)
        self.state = PipelineState.NARRATION_DONE
        print(f"[pipeline] step2 audio -> {context.audio_path}")
        print(f"[pipeline] step2 script -> {context.text_path}")

        print(f"[pipeline] step3/{total} muxing video")
        self._mux_step.run(context, options)
        self.state = PipelineState.VIDEO_DONE
        print(f"[pipeline] step3 video -> {context.video_path}")

        return PipelineResult(
            state=self.state,
            context=context,
            artifacts=(
                context.image_path,
                context.audio_path,
                context.text_path,
                context.video_path,
            ),
        )
