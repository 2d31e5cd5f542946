"""Shared fixtures for pipeline tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from blog_to_video.dto.pipeline_options import PipelineOptions
from blog_to_video.services.run_context_planner import RunContextPlanner
from blog_to_video.services.timestamp_factory import TimestampFactory
from blog_to_video.steps.image_compose import ImageComposeStep
from blog_to_video.steps.narration import NarrationStep
from blog_to_video.steps.video_mux import VideoMuxStep
from blog_to_video.use_cases.run_blog_to_video import RunBlogToVideoUseCase
from blog_to_video.validators.input_path_validator import InputPathValidator

from fakes import IMAGE_TOOL, MUXER_TOOL, NARRATOR_TOOL, RecordingRunner, fixed_clock


@pytest.fixture
def caller_dir(tmp_path: Path) -> Path:
    """Working directory of the user invoking the CLI, holding the inputs."""
    cwd = tmp_path / "caller"
    cwd.mkdir()
    (cwd / "bg.png").write_bytes(b"background")
    (cwd / "thumb.png").write_bytes(b"thumbnail")
    return cwd


@pytest.fixture
def output_root(tmp_path: Path) -> Path:
    return tmp_path / "install" / "outputs"


@pytest.fixture
def make_options():
    def _make(**overrides) -> PipelineOptions:
        values = dict(
            url="https://example.com/post",
            project_name="demo",
            header="Tech Blog",
            title="Hello World",
            image="bg.png",
        )
        values.update(overrides)
        return PipelineOptions(**values)

    return _make


@pytest.fixture
def make_planner(output_root: Path, caller_dir: Path):
    def _make(clock=fixed_clock(2024, 1, 2, 3, 4, 5)) -> RunContextPlanner:
        return RunContextPlanner(
            output_root=output_root,
            timestamp_factory=TimestampFactory(clock=clock),
            path_validator=InputPathValidator(cwd=caller_dir),
        )

    return _make


@pytest.fixture
def make_use_case(make_planner):
    def _make(
        runner: RecordingRunner,
        clock=fixed_clock(2024, 1, 2, 3, 4, 5),
    ) -> RunBlogToVideoUseCase:
        return RunBlogToVideoUseCase(
            planner=make_planner(clock),
            image_step=ImageComposeStep(runner, IMAGE_TOOL),
            narration_step=NarrationStep(runner, NARRATOR_TOOL),
            mux_step=VideoMuxStep(runner, MUXER_TOOL),
        )

    return _make
