"""Step that muxes the title card and the narration into a video."""

from __future__ import annotations

from blog_to_video.dto.pipeline_options import PipelineOptions
from blog_to_video.dto.run_context import RunContext
from blog_to_video.dto.step_spec import StepSpec
from blog_to_video.steps.base import StepExecutor


class VideoMuxStep(StepExecutor):
    step_name = "video"

    def build(self, context: RunContext, options: PipelineOptions) -> StepSpec:
        return StepSpec(
            step_name=self.step_name,
            command_name=self._command_name,
            arguments=(
                "-i",
                str(context.image_path),
                "-a",
                str(context.audio_path),
                "-o",
                str(context.video_path),
            ),
            expected_output_path=context.video_path,
        )
