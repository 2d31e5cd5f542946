"""Immutable data carriers passed between pipeline components."""

from .execution_result import ExecutionResult
from .pipeline_options import PipelineOptions, TTS_ENGINES
from .pipeline_result import PipelineResult, PipelineState
from .run_context import RunContext
from .step_spec import StepSpec

__all__ = [
    "ExecutionResult",
    "PipelineOptions",
    "PipelineResult",
    "PipelineState",
    "RunContext",
    "StepSpec",
    "TTS_ENGINES",
]
