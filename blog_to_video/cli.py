"""Command-line entry point for the blog-to-video pipeline."""

from __future__ import annotations

import argparse
import logging
import math
import sys
from typing import Sequence

from blog_to_video.config.tool_settings import ToolSettings
from blog_to_video.dto.pipeline_options import (
    DEFAULT_TTS_ENGINE,
    TTS_ENGINES,
    PipelineOptions,
)
from blog_to_video.errors import PipelineError
from blog_to_video.use_cases.run_blog_to_video import RunBlogToVideoUseCase

FAILURE_BANNER = "[blog-to-video] pipeline failed:"


def finite_number(value: str) -> float:
    """Parse a float argument, rejecting nan and infinity."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from None
    if not math.isfinite(number):
        raise argparse.ArgumentTypeError(f"number must be finite: {value!r}")
    return number


def add_pipeline_arguments(parser: argparse.ArgumentParser) -> None:
    """Register pipeline CLI arguments on the provided parser."""
    parser.add_argument("url", help="URL of the blog article")
    parser.add_argument("name", help="Project name (used as the output folder)")
    parser.add_argument("header", help="Header text drawn at the top of the image")
    parser.add_argument("title", help="Article title drawn in the middle of the image")

    parser.add_argument(
        "-i",
        "--image",
        required=True,
        help="Background image path (resolved against the current directory)",
    )
    parser.add_argument(
        "--embed-thumb",
        default=None,
        help="Image embedded on the right side of the title card",
    )
    parser.add_argument(
        "--title-size", type=finite_number, default=None, help="Title font size"
    )
    parser.add_argument(
        "--title-offset-y",
        type=finite_number,
        default=None,
        help="Vertical offset applied to the title",
    )
    parser.add_argument(
        "--title-line-spacing",
        type=finite_number,
        default=None,
        help="Line spacing adjustment for the title (e.g. -30)",
    )
    parser.add_argument(
        "--tts",
        choices=list(TTS_ENGINES),
        default=DEFAULT_TTS_ENGINE,
        help="Text-to-speech engine used by the narrator (default: google)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Keep intermediate narration artifacts and step logs in debug_<timestamp>/",
    )
    parser.add_argument(
        "--image-only",
        action="store_true",
        help="Stop after the title image has been generated",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blog-to-video",
        description="Generate a short explainer video from a blog article.",
    )
    add_pipeline_arguments(parser)
    return parser


def options_from_args(args: argparse.Namespace) -> PipelineOptions:
    """Translate parsed arguments into the explicit options struct."""
    return PipelineOptions(
        url=args.url,
        project_name=args.name,
        header=args.header,
        title=args.title,
        image=args.image,
        embed_thumb=args.embed_thumb,
        title_size=args.title_size,
        title_offset_y=args.title_offset_y,
        title_line_spacing=args.title_line_spacing,
        tts=args.tts,
        debug=args.debug,
        image_only=args.image_only,
    )


def report_failure(error: PipelineError) -> None:
    """Print the failure banner, captured tool stderr and the error message."""
    print(f"\n{FAILURE_BANNER}", file=sys.stderr)
    if error.stderr_text:
        sys.stderr.write(error.stderr_text)
        if not error.stderr_text.endswith("\n"):
            sys.stderr.write("\n")
    print(error.message, file=sys.stderr)


def main(
    argv: Sequence[str] | None = None,
    use_case: RunBlogToVideoUseCase | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    options = options_from_args(args)
    if use_case is None:
        use_case = RunBlogToVideoUseCase.from_settings(ToolSettings.from_env())

    try:
        result = use_case.execute(options)
    except PipelineError as exc:
        report_failure(exc)
        return 1

    print(f"\n[pipeline] done -> {result.final_artifact}")
    return 0
