"""End-to-end project generation.

Runs the full flow for one descriptor: render the plan, export it, set up
version control when requested, and optionally zip the result.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .archive import ArchiveBuilder
from .config import Config
from .exporter import Exporter
from .models import ProjectDescriptor, RenderPlan, RenderReport
from .renderer import ProjectRenderer
from .utils import clear_path
from .vcs import SourceControlInitializer


@dataclass
class GenerationResult:
    """Outcome of :meth:`ProjectGenerator.generate`."""

    plan: RenderPlan
    report: RenderReport
    git_initialized: bool = False
    archive: Optional[Path] = None


class ProjectGenerator:
    """Main generation orchestrator.

    Each call is independent; the generator holds no per-project state, so
    one instance can serve many descriptors as long as every call gets its
    own destination directory.
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()
        self.renderer = ProjectRenderer()
        self.exporter = Exporter()
        self.archiver = ArchiveBuilder()
        self.vcs = SourceControlInitializer(self.config.git_executable)

    def generate(
        self,
        descriptor: ProjectDescriptor,
        destination: str | Path | None = None,
        archive_path: str | Path | None = None,
    ) -> GenerationResult:
        """Generate the project described by *descriptor*.

        Args:
            descriptor: Validated project descriptor.
            destination: Project root.  Defaults to ``<output_dir>/<name>``.
            archive_path: When given, the exported project is zipped here.

        Returns:
            The plan, the export report and what else was produced.
        """
        root = Path(destination) if destination is not None else self.config.project_dir(
            descriptor.name
        )
        # Rendering happens before anything touches the destination
        plan = self.renderer.render(descriptor)

        if self.config.clean_destination:
            clear_path(root)
        report = self.exporter.export(plan, root)

        git_initialized = self.vcs.initialize(root, descriptor.git_repo, descriptor.git_init)

        archive = None
        if archive_path is not None:
            archive = self.archiver.build(root, archive_path)

        return GenerationResult(
            plan=plan, report=report, git_initialized=git_initialized, archive=archive
        )


def generate(
    descriptor: ProjectDescriptor,
    destination: str | Path,
    archive_path: str | Path | None = None,
) -> GenerationResult:
    """Generate *descriptor* into *destination* with default settings."""
    return ProjectGenerator().generate(descriptor, destination, archive_path)
