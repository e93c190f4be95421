"""Shared pytest fixtures for the Gradle Bootstrap test suite.

Provides reusable fixtures for:
- Temporary project and archive directories
- Representative project descriptors (plain Java, Kotlin + TestNG, everything)
- A factory for descriptors with arbitrary options
- Mock subprocess results for git commands
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Any, Callable
from unittest.mock import MagicMock

import pytest

from gradle_bootstrap.models import (
    BuildModel,
    Dependency,
    Language,
    License,
    LoggingFramework,
    ProjectDescriptor,
    Repository,
    Scope,
    TestingFramework,
)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Destination directory for an exported project (not created yet)."""
    return tmp_path / "projects" / "demo"


@pytest.fixture
def tmp_archive_path(tmp_path: Path) -> Path:
    """Destination path for a zip archive (parent not created yet)."""
    return tmp_path / "zipped" / "demo.zip"


# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------

@pytest.fixture
def make_descriptor() -> Callable[..., ProjectDescriptor]:
    """Factory building a descriptor with a fixed copyright year.

    Usage::

        def test_something(make_descriptor):
            d = make_descriptor(languages=(Language.SCALA,), license=License.MIT)
    """

    def factory(**overrides: Any) -> ProjectDescriptor:
        build = overrides.pop("build", None) or BuildModel(
            testing=overrides.pop("testing", TestingFramework.NONE),
            logging=overrides.pop("logging", LoggingFramework.NONE),
        )
        fields: dict[str, Any] = {
            "name": "demo",
            "group": "com.example",
            "languages": (Language.JAVA,),
            "copyright_year": 2024,
            "build": build,
        }
        fields.update(overrides)
        return ProjectDescriptor(**fields)

    return factory


@pytest.fixture
def java_descriptor(make_descriptor) -> ProjectDescriptor:
    """Plain Java project: no frameworks, no license, no git."""
    return make_descriptor()


@pytest.fixture
def kotlin_testng_descriptor(make_descriptor) -> ProjectDescriptor:
    """Kotlin project tested with TestNG."""
    return make_descriptor(languages=(Language.KOTLIN,), testing=TestingFramework.TESTNG)


@pytest.fixture
def full_descriptor() -> ProjectDescriptor:
    """A descriptor that touches every part of the renderer."""
    return ProjectDescriptor(
        name="full-app",
        group="com.example.full",
        version="1.2.3",
        languages=(Language.KOTLIN, Language.JAVA, Language.GROOVY),
        license=License.APACHE,
        git_init=True,
        git_repo="https://example.com/full-app.git",
        copyright_year=2024,
        build=BuildModel(
            testing=TestingFramework.TESTNG,
            logging=LoggingFramework.SLF4J,
            project_context=(Repository.MAVEN_CENTRAL, Repository.MAVEN_LOCAL),
            dependencies=(
                Dependency(group="com.google.guava", artifact="guava", version="33.2.0-jre"),
                Dependency(group="org.testng", artifact="testng", version="6.0", scope=Scope.TEST),
            ),
            gradle_plugins=(
                Dependency(group="net.swisstech", artifact="gradle-dropwizard", version="1.1.4"),
            ),
            plugins=("application",),
        ),
    )


# ---------------------------------------------------------------------------
# Mock subprocess
# ---------------------------------------------------------------------------

@pytest.fixture
def completed_process() -> Callable[..., subprocess.CompletedProcess]:
    """Factory for ``subprocess.CompletedProcess`` results.

    Usage::

        def test_git(completed_process):
            with patch("subprocess.run", return_value=completed_process(stdout="origin")):
                ...
    """

    def factory(
        stdout: str = "", stderr: str = "", returncode: int = 0
    ) -> subprocess.CompletedProcess:
        result = MagicMock(spec=subprocess.CompletedProcess)
        result.stdout = stdout
        result.stderr = stderr
        result.returncode = returncode
        return result

    return factory
