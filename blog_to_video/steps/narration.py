"""Step that extracts the article and records the voice-over."""

from __future__ import annotations

from blog_to_video.dto.pipeline_options import PipelineOptions
from blog_to_video.dto.run_context import RunContext
from blog_to_video.dto.step_spec import StepSpec
from blog_to_video.steps.base import StepExecutor


class NarrationStep(StepExecutor):
    """Narrator writes the mp3 and the transcript; only the mp3 is verified."""

    step_name = "narration"

    def build(self, context: RunContext, options: PipelineOptions) -> StepSpec:
        arguments = [
            options.url,
            "-o",
            context.project_name,
            "--tts",
            options.tts,
            "--mp3-output",
            str(context.audio_path),
            "--txt-output",
            str(context.text_path),
        ]
        if context.debug_dir is not None:
            arguments.extend(["-d", str(context.debug_dir)])
        return StepSpec(
            step_name=self.step_name,
            command_name=self._command_name,
            arguments=tuple(arguments),
            expected_output_path=context.audio_path,
        )
