"""Validation helpers for user-provided paths and names."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urlparse

from blog_to_video.errors import InvalidProjectNameError, MissingInputFileError

URI_SCHEMES = frozenset({"http", "https", "file"})


class InputPathValidator:
    """Centralizes validation for paths and names typed by the user."""

    def __init__(self, cwd: Path | None = None) -> None:
        self._cwd = cwd

    def is_uri(self, raw_path: str) -> bool:
        """Return True for ``http(s)://`` and ``file://`` inputs."""
        parsed = urlparse(raw_path)
        if parsed.scheme not in URI_SCHEMES:
            return False
        return bool(parsed.netloc) or parsed.scheme == "file"

    def resolve_input_file(self, raw_path: str, label: str) -> str:
        """Resolve an input against the caller's cwd and require it to exist.

        URIs are returned untouched; the downstream tool fetches them.
        """
        if self.is_uri(raw_path):
            return raw_path
        cwd = self._cwd or Path.cwd()
        resolved = (cwd / Path(raw_path).expanduser()).resolve()
        if not resolved.is_file():
            raise MissingInputFileError(label, resolved)
        return str(resolved)

    def safe_project_name(self, raw_name: str) -> str:
        """Return the project name if it is a single relative path segment."""
        name = raw_name.strip()
        if not name:
            raise InvalidProjectNameError("Project name must not be empty.")
        candidate = Path(name)
        if candidate.is_absolute() or len(candidate.parts) != 1 or name in {".", ".."}:
            raise InvalidProjectNameError(
                f"Project name must be a plain folder name: {raw_name!r}"
            )
        return name
