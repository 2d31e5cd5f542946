"""Path configuration for pipeline outputs."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path


def get_application_root() -> Path:
    """
    Get the application root directory (PyInstaller-compatible).

    Returns:
        Application root path:
        - When frozen (PyInstaller): directory containing the executable
        - When running from source: directory that contains the package
    """
    if getattr(sys, "frozen", False):
        return Path(sys.executable).parent
    # blog_to_video/config/paths.py -> repository root
    return Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class AppPaths:
    """Resolved filesystem roots used by the pipeline.

    Generated artifacts live next to the tool itself, never under the
    caller's working directory.
    """

    app_root: Path
    output_root: Path

    @classmethod
    def from_output_root(cls, output_root: Path | str | None) -> "AppPaths":
        """Resolve roots, honouring an explicit output root override."""
        app_root = get_application_root()
        if output_root:
            resolved = Path(output_root).expanduser()
            if not resolved.is_absolute():
                resolved = app_root / resolved
        else:
            resolved = app_root / "outputs"
        return cls(app_root=app_root, output_root=resolved)

    @classmethod
    def default(cls) -> "AppPaths":
        """Create AppPaths with the default ``<app root>/outputs`` location."""
        return cls.from_output_root(None)
