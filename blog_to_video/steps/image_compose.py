"""Step that renders the title card with the image compositor."""

from __future__ import annotations

from blog_to_video.dto.pipeline_options import PipelineOptions
from blog_to_video.dto.run_context import RunContext
from blog_to_video.dto.step_spec import StepSpec
from blog_to_video.steps.base import StepExecutor, format_number


class ImageComposeStep(StepExecutor):
    """Header and title over the background image, optional thumbnail."""

    step_name = "image"

    def build(self, context: RunContext, options: PipelineOptions) -> StepSpec:
        arguments = [
            context.background_image,
            "--header",
            options.header,
            "--title",
            options.title,
        ]

        def _add_flag(name: str, value: float | str | None) -> None:
            if value is None:
                return
            if isinstance(value, str):
                arguments.extend([name, value])
            else:
                arguments.extend([name, format_number(value)])

        _add_flag("--embed-thumb", context.embed_thumb)
        _add_flag("--title-size", options.title_size)
        _add_flag("--title-offset-y", options.title_offset_y)
        _add_flag("--title-line-spacing", options.title_line_spacing)

        arguments.extend(["--output", str(context.image_path)])
        return StepSpec(
            step_name=self.step_name,
            command_name=self._command_name,
            arguments=tuple(arguments),
            expected_output_path=context.image_path,
        )
