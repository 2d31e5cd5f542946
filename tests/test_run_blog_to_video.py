"""Tests for the pipeline controller use case."""

from __future__ import annotations

import pytest

from blog_to_video.dto.pipeline_result import PipelineState
from blog_to_video.errors import (
    ExternalCommandError,
    MissingInputFileError,
    MissingOutputArtifactError,
)

from fakes import IMAGE_TOOL, MUXER_TOOL, NARRATOR_TOOL, RecordingRunner, fixed_clock


class TestImageOnly:
    """Image-only runs stop after the compositor."""

    def test_only_image_step_runs(self, make_use_case, make_options, output_root):
        runner = RecordingRunner()
        use_case = make_use_case(runner)

        result = use_case.execute(make_options(image_only=True))

        assert result.state == PipelineState.IMAGE_ONLY_COMPLETE
        assert use_case.state == PipelineState.IMAGE_ONLY_COMPLETE
        assert runner.tools_invoked == [IMAGE_TOOL]
        assert result.artifacts == (result.context.image_path,)
        produced = sorted(p.name for p in (output_root / "demo").iterdir())
        assert produced == ["screen-20240102-030405.png"]


class TestFullRun:
    """Successful runs produce all four artifacts."""

    def test_all_artifacts_exist(self, make_use_case, make_options):
        runner = RecordingRunner()
        result = make_use_case(runner).execute(make_options())

        ctx = result.context
        assert result.state == PipelineState.VIDEO_DONE
        assert runner.tools_invoked == [IMAGE_TOOL, NARRATOR_TOOL, MUXER_TOOL]
        for path in (ctx.image_path, ctx.audio_path, ctx.text_path, ctx.video_path):
            assert path.exists()
        assert result.final_artifact == ctx.video_path

    def test_mux_uses_this_runs_image_and_audio(self, make_use_case, make_options):
        runner = RecordingRunner()
        ctx = make_use_case(runner).execute(make_options()).context

        assert runner.commands[2] == [
            MUXER_TOOL,
            "-i",
            str(ctx.image_path),
            "-a",
            str(ctx.audio_path),
            "-o",
            str(ctx.video_path),
        ]

    def test_artifact_names_follow_timestamp(self, make_use_case, make_options, output_root):
        result = make_use_case(RecordingRunner()).execute(make_options())

        base = output_root / "demo"
        ctx = result.context
        assert ctx.base_output_dir == base
        assert ctx.image_path == base / "screen-20240102-030405.png"
        assert ctx.audio_path == base / "dub-20240102-030405.mp3"
        assert ctx.text_path == base / "script-20240102-030405.txt"
        assert ctx.video_path == base / "video-20240102-030405.mp4"

    def test_successive_runs_do_not_collide(self, make_use_case, make_options, output_root):
        first = make_use_case(RecordingRunner(), fixed_clock(2024, 1, 2, 3, 4, 5))
        second = make_use_case(RecordingRunner(), fixed_clock(2024, 1, 2, 3, 4, 6))

        first_result = first.execute(make_options())
        second_result = second.execute(make_options())

        assert not set(first_result.artifacts) & set(second_result.artifacts)
        for path in first_result.artifacts + second_result.artifacts:
            assert path.exists()
        assert len(list((output_root / "demo").iterdir())) == 8


class TestFailures:
    """The first failing step aborts the run and leaves earlier artifacts."""

    def test_missing_background_spawns_nothing(self, make_use_case, make_options, output_root):
        runner = RecordingRunner()

        with pytest.raises(MissingInputFileError):
            make_use_case(runner).execute(make_options(image="missing.png"))

        assert runner.commands == []
        base = output_root / "demo"
        assert base.is_dir()
        assert list(base.iterdir()) == []

    def test_missing_embed_thumb_spawns_nothing(self, make_use_case, make_options):
        runner = RecordingRunner()

        with pytest.raises(MissingInputFileError, match="Embedded image"):
            make_use_case(runner).execute(make_options(embed_thumb="nope.png"))

        assert runner.commands == []

    def test_compositor_failure_stops_pipeline(self, make_use_case, make_options):
        runner = RecordingRunner({IMAGE_TOOL: "fail"})
        use_case = make_use_case(runner)

        with pytest.raises(ExternalCommandError) as excinfo:
            use_case.execute(make_options())

        assert "code 2" in str(excinfo.value)
        assert excinfo.value.exit_code == 2
        assert excinfo.value.stderr_text == "boom\n"
        assert runner.tools_invoked == [IMAGE_TOOL]
        assert use_case.state == PipelineState.INIT

    def test_narrator_without_audio_never_muxes(self, make_use_case, make_options):
        runner = RecordingRunner({NARRATOR_TOOL: "silent"})
        use_case = make_use_case(runner)

        with pytest.raises(MissingOutputArtifactError) as excinfo:
            use_case.execute(make_options())

        assert excinfo.value.path.name == "dub-20240102-030405.mp3"
        assert runner.tools_invoked == [IMAGE_TOOL, NARRATOR_TOOL]
        assert use_case.state == PipelineState.IMAGE_DONE

    def test_narration_failure_keeps_image(self, make_use_case, make_options, output_root):
        runner = RecordingRunner({NARRATOR_TOOL: "fail"})

        with pytest.raises(ExternalCommandError):
            make_use_case(runner).execute(make_options())

        assert (output_root / "demo" / "screen-20240102-030405.png").exists()

    def test_mux_failure_keeps_earlier_artifacts(self, make_use_case, make_options, output_root):
        runner = RecordingRunner({MUXER_TOOL: "fail"})
        use_case = make_use_case(runner)

        with pytest.raises(ExternalCommandError):
            use_case.execute(make_options())

        base = output_root / "demo"
        assert sorted(p.name for p in base.iterdir()) == [
            "dub-20240102-030405.mp3",
            "screen-20240102-030405.png",
            "script-20240102-030405.txt",
        ]
        assert use_case.state == PipelineState.NARRATION_DONE

    def test_silent_compositor_is_caught(self, make_use_case, make_options):
        runner = RecordingRunner({IMAGE_TOOL: "silent"})

        with pytest.raises(MissingOutputArtifactError):
            make_use_case(runner).execute(make_options())

        assert runner.tools_invoked == [IMAGE_TOOL]


class TestDebugMode:
    def test_debug_dir_created_and_passed_to_narrator(
        self, make_use_case, make_options, output_root
    ):
        runner = RecordingRunner()
        result = make_use_case(runner).execute(make_options(debug=True))

        debug_dir = output_root / "demo" / "debug_20240102-030405"
        assert debug_dir.is_dir()
        assert result.context.debug_dir == debug_dir
        narration = runner.commands[1]
        assert narration[-2:] == ["-d", str(debug_dir)]

    def test_debug_dir_holds_step_logs(self, make_use_case, make_options, output_root):
        make_use_case(RecordingRunner()).execute(make_options(debug=True))

        debug_dir = output_root / "demo" / "debug_20240102-030405"
        assert sorted(p.name for p in debug_dir.iterdir()) == [
            "image.log",
            "narration.log",
            "video.log",
        ]

    def test_no_debug_dir_without_flag(self, make_use_case, make_options, output_root):
        runner = RecordingRunner()
        make_use_case(runner).execute(make_options())

        base = output_root / "demo"
        assert not any(p.name.startswith("debug_") for p in base.iterdir())
        assert "-d" not in runner.commands[1]
