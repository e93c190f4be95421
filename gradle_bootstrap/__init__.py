"""Gradle Bootstrap -- generates ready-to-build Gradle project skeletons.

Takes a ``ProjectDescriptor`` (languages, testing and logging frameworks,
license, repositories, extra dependencies, git settings) and produces a
project directory with a ``build.gradle``, ``settings.gradle``, per-language
source roots and an optional license, git repository and zip archive.

Quick usage::

    from gradle_bootstrap import ProjectDescriptor, archive, export, render

    descriptor = ProjectDescriptor.from_options(
        "my-project", "com.example.app", "kotlin", testing="testng",
    )
    plan = render(descriptor)
    report = export(plan, "/tmp/output/my-project")
    archive(report.root, "/tmp/output/my-project.zip")
"""

from gradle_bootstrap.archive import ArchiveBuilder, archive
from gradle_bootstrap.catalog import CATALOG, OptionCatalog
from gradle_bootstrap.errors import (
    ArchiveError,
    BootstrapError,
    ConfigurationError,
    ExportError,
    ValidationError,
)
from gradle_bootstrap.exporter import Exporter, export
from gradle_bootstrap.generator import GenerationResult, ProjectGenerator, generate
from gradle_bootstrap.models import (
    BuildModel,
    Dependency,
    Language,
    License,
    LoggingFramework,
    ProjectDescriptor,
    RenderPlan,
    RenderReport,
    Repository,
    ResolvedArtifacts,
    Scope,
    TestingFramework,
)
from gradle_bootstrap.renderer import ProjectRenderer, render
from gradle_bootstrap.resolver import CompatibilityResolver, resolve
from gradle_bootstrap.vcs import SourceControlInitializer, init_source_control

__all__ = [
    "CATALOG",
    "ArchiveBuilder",
    "ArchiveError",
    "BootstrapError",
    "BuildModel",
    "CompatibilityResolver",
    "ConfigurationError",
    "Dependency",
    "ExportError",
    "Exporter",
    "GenerationResult",
    "Language",
    "License",
    "LoggingFramework",
    "OptionCatalog",
    "ProjectDescriptor",
    "ProjectGenerator",
    "ProjectRenderer",
    "RenderPlan",
    "RenderReport",
    "Repository",
    "ResolvedArtifacts",
    "Scope",
    "SourceControlInitializer",
    "TestingFramework",
    "ValidationError",
    "archive",
    "export",
    "generate",
    "init_source_control",
    "render",
    "resolve",
]
