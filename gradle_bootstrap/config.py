"""Gradle Bootstrap configuration.

Centralised, typed settings for the command-line front end.  Settings use
Pydantic v2 models so they are validated at construction time and can be
serialised to/from JSON or read from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class Config(BaseModel):
    """Global Gradle Bootstrap configuration.

    Instances are typically created once by the CLI entry point and passed
    to the components that need them.
    """

    output_dir: Path = Field(default=Path("./output"), description="Parent of generated projects")
    archive_dir: Path = Field(default=Path("./output/archives"), description="Where zips go")
    git_executable: str = Field(default="git", min_length=1)
    clean_destination: bool = Field(
        default=False, description="Delete an existing project directory before exporting"
    )

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    def project_dir(self, name: str) -> Path:
        """Directory a project called *name* is exported to."""
        return self.output_dir / name

    def archive_path(self, name: str) -> Path:
        """Default archive location for a project called *name*."""
        return self.archive_dir / f"{name}.zip"

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path | None = None) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Defaults to ``<output_dir>/gradle-bootstrap.json``.

        Returns:
            The path where the file was written.
        """
        target = path or (self.output_dir / "gradle-bootstrap.json")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            GBS_OUTPUT_DIR, GBS_ARCHIVE_DIR, GBS_GIT_EXECUTABLE,
            GBS_CLEAN_DESTINATION.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("GBS_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["GBS_OUTPUT_DIR"])
        if os.environ.get("GBS_ARCHIVE_DIR"):
            kwargs["archive_dir"] = Path(os.environ["GBS_ARCHIVE_DIR"])
        elif "output_dir" in kwargs:
            kwargs["archive_dir"] = kwargs["output_dir"] / "archives"
        if os.environ.get("GBS_GIT_EXECUTABLE"):
            kwargs["git_executable"] = os.environ["GBS_GIT_EXECUTABLE"]
        if os.environ.get("GBS_CLEAN_DESTINATION"):
            kwargs["clean_destination"] = (
                os.environ["GBS_CLEAN_DESTINATION"].strip().lower() in ("1", "true", "yes")
            )
        return cls(**kwargs)

    def ensure_directories(self) -> None:
        """Create the output and archive directories."""
        for directory in (self.output_dir, self.archive_dir):
            directory.mkdir(parents=True, exist_ok=True)
