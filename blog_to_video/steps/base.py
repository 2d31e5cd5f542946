"""Base class for pipeline steps.

A step turns the run context and user options into a single ``StepSpec``,
hands it to the process runner and then checks that the declared output
artifact exists. Every step declares one, so verification is uniform.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from blog_to_video.dto.pipeline_options import PipelineOptions
from blog_to_video.dto.run_context import RunContext
from blog_to_video.dto.step_spec import StepSpec
from blog_to_video.errors import MissingOutputArtifactError
from blog_to_video.services.process_runner import ProcessRunner

logger = logging.getLogger(__name__)


def format_number(value: float) -> str:
    """Render a numeric flag without a trailing ``.0`` for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


class StepExecutor(ABC):
    """Build one external invocation and run it through ``ProcessRunner``."""

    step_name: str = "step"

    def __init__(self, runner: ProcessRunner, command_name: str) -> None:
        self._runner = runner
        self._command_name = command_name

    @abstractmethod
    def build(self, context: RunContext, options: PipelineOptions) -> StepSpec:
        """Translate the run context and options into a command vector."""

    def run(self, context: RunContext, options: PipelineOptions) -> StepSpec:
        """Execute the step and verify its declared output."""
        spec = self.build(context, options)
        log_path = None
        if context.debug_dir is not None:
            log_path = context.debug_dir / f"{spec.step_name}.log"

        self._runner.run(spec.argv, log_path=log_path)

        expected = spec.expected_output_path
        if expected is not None and not expected.exists():
            raise MissingOutputArtifactError(spec.step_name, expected)
        logger.debug("%s produced %s", spec.step_name, expected)
        return spec
