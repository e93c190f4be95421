"""Data model for Gradle Bootstrap.

Defines the option enumerations, the pydantic descriptor hierarchy that
describes a project to generate, and the plain dataclasses that carry the
derived artifacts, the in-memory render plan, and the export report.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from pathlib import Path, PurePosixPath
from typing import Any, Iterable, Optional
from urllib.parse import urlparse

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Language(str, Enum):
    """JVM language a project is written in.

    Declaration order is significant: it is the order in which languages are
    resolved and rendered, independent of the order a caller listed them.
    """
    JAVA = "java"
    GROOVY = "groovy"
    SCALA = "scala"
    KOTLIN = "kotlin"


class TestingFramework(str, Enum):
    """Unit testing framework wired into the generated build."""

    # Not a pytest test class
    __test__ = False

    NONE = "none"
    JUNIT = "junit"
    JUNIT_JUPITER = "junit_jupiter"
    TESTNG = "testng"
    SPOCK = "spock"


class LoggingFramework(str, Enum):
    """Logging library added to the compile classpath."""
    NONE = "none"
    SLF4J = "slf4j"
    LOG4J = "log4j"
    LOGBACK_CLASSIC = "logback_classic"
    COMMONS_LOGGING = "commons_logging"


class License(str, Enum):
    """License whose canonical text is written to ``LICENSE``."""
    NONE = "none"
    APACHE = "apache"
    MIT = "mit"
    BSD_2_CLAUSE = "bsd_2_clause"
    BSD_3_CLAUSE = "bsd_3_clause"
    UNLICENSE = "unlicense"


class Repository(str, Enum):
    """Artifact repository declared in the build script."""
    MAVEN_CENTRAL = "maven_central"
    JCENTER = "jcenter"
    MAVEN_LOCAL = "maven_local"
    GOOGLE = "google"
    GRADLE_PLUGIN_PORTAL = "gradle_plugin_portal"


class Scope(str, Enum):
    """Dependency scope.  The value is the Gradle configuration name."""
    COMPILE = "implementation"
    PROVIDED = "compileOnly"
    RUNTIME = "runtimeOnly"
    TEST = "testImplementation"
    TEST_RUNTIME = "testRuntimeOnly"
    CLASSPATH = "classpath"


# ---------------------------------------------------------------------------
# Constraints
# ---------------------------------------------------------------------------

class Constraints:
    """Length and charset limits applied to descriptor fields."""

    NAME_MIN_LENGTH = 1
    NAME_MAX_LENGTH = 100
    GROUP_MIN_LENGTH = 1
    GROUP_MAX_LENGTH = 100
    # Each dot-separated part of the group becomes a directory name
    DIR_MIN_LENGTH = 1
    DIR_MAX_LENGTH = 64
    VERSION_MIN_LENGTH = 1
    VERSION_MAX_LENGTH = 30

    NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")
    GROUP_PART_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
    VERSION_PATTERN = re.compile(r"^[A-Za-z0-9._+-]+$")
    GIT_SCHEMES = ("git", "http", "https")

    DEFAULT_VERSION = "0.1"


def _check_length(value: str, low: int, high: int, label: str) -> None:
    if not low <= len(value) <= high:
        raise ValueError(f"{label} length must be between {low} and {high}")


def validate_git_url(url: str) -> str:
    """Return *url* unchanged if it is an acceptable remote, else raise ``ValueError``."""
    parsed = urlparse(url)
    if parsed.scheme not in Constraints.GIT_SCHEMES:
        raise ValueError(
            "Only acceptable schemes are " + ", ".join(Constraints.GIT_SCHEMES)
        )
    if not parsed.netloc:
        raise ValueError(f"Malformed URL: {url!r}")
    return url


def _unique(values: Iterable[Any]) -> tuple[Any, ...]:
    """Drop repeated values, keeping the first occurrence."""
    return tuple(dict.fromkeys(values))


# ---------------------------------------------------------------------------
# Descriptor models
# ---------------------------------------------------------------------------

class Dependency(BaseModel):
    """A single Maven coordinate with the scope it is declared under."""

    model_config = ConfigDict(frozen=True)

    group: str = Field(
        ..., pattern=r"^[A-Za-z0-9._-]+$", description="Maven group, e.g. 'org.testng'"
    )
    artifact: str = Field(..., pattern=r"^[A-Za-z0-9._-]+$", description="Maven artifact id")
    version: Optional[str] = Field(
        default=None, pattern=r"^[A-Za-z0-9._+-]+$", description="Version, if pinned"
    )
    scope: Scope = Field(default=Scope.COMPILE)

    @property
    def key(self) -> tuple[str, str, Scope]:
        """Identity used for deduplication."""
        return (self.group, self.artifact, self.scope)

    @property
    def notation(self) -> str:
        """``group:artifact[:version]`` string notation."""
        if self.version:
            return f"{self.group}:{self.artifact}:{self.version}"
        return f"{self.group}:{self.artifact}"

    @classmethod
    def parse(cls, notation: str, scope: Scope = Scope.COMPILE) -> "Dependency":
        """Build a dependency from ``group:artifact[:version]`` notation."""
        parts = notation.strip().split(":")
        if len(parts) not in (2, 3) or not all(parts):
            raise ValueError(
                f"Invalid dependency notation {notation!r}; expected group:artifact[:version]"
            )
        version = parts[2] if len(parts) == 3 else None
        return cls(group=parts[0], artifact=parts[1], version=version, scope=scope)


class BuildModel(BaseModel):
    """Build-level options: frameworks, repositories and extra contributions."""

    model_config = ConfigDict(frozen=True)

    testing: TestingFramework = Field(default=TestingFramework.NONE)
    logging: LoggingFramework = Field(default=LoggingFramework.NONE)
    project_context: tuple[Repository, ...] = Field(
        default=(), description="Repositories declared by the caller"
    )
    dependencies: tuple[Dependency, ...] = Field(default=())
    gradle_plugins: tuple[Dependency, ...] = Field(
        default=(), description="Buildscript classpath entries for third-party plugins"
    )
    plugins: tuple[str, ...] = Field(default=(), description="Plugin ids to apply")

    @field_validator("project_context", "plugins")
    @classmethod
    def _ordered_set(cls, value: tuple[Any, ...]) -> tuple[Any, ...]:
        return _unique(value)

    @field_validator("plugins")
    @classmethod
    def _plugin_ids(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for plugin_id in value:
            if not plugin_id or not re.match(r"^[A-Za-z0-9._-]+$", plugin_id):
                raise ValueError(f"Invalid plugin id: {plugin_id!r}")
        return value

    @field_validator("gradle_plugins")
    @classmethod
    def _classpath_scope(cls, value: tuple[Dependency, ...]) -> tuple[Dependency, ...]:
        return tuple(
            dep if dep.scope is Scope.CLASSPATH
            else dep.model_copy(update={"scope": Scope.CLASSPATH})
            for dep in value
        )


class ProjectDescriptor(BaseModel):
    """Everything needed to generate one project.

    Instances are frozen; build a new descriptor instead of mutating one.
    Constructing a descriptor directly raises :class:`pydantic.ValidationError`
    on bad input, while :meth:`from_options` reports the core
    :class:`~gradle_bootstrap.errors.ValidationError`.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Project name (rootProject.name)")
    group: str = Field(..., description="Dotted group, also the base package")
    version: str = Field(default=Constraints.DEFAULT_VERSION)
    languages: tuple[Language, ...] = Field(..., description="Languages, at least one")
    license: License = Field(default=License.NONE)
    git_repo: Optional[str] = Field(default=None, description="Remote to register as origin")
    git_init: bool = Field(default=False)
    build: BuildModel = Field(default_factory=BuildModel)
    copyright_year: int = Field(default_factory=lambda: date.today().year, ge=1970)
    copyright_holder: Optional[str] = Field(default=None)

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        _check_length(value, Constraints.NAME_MIN_LENGTH, Constraints.NAME_MAX_LENGTH, "Name")
        if not Constraints.NAME_PATTERN.match(value):
            raise ValueError("Name may only contain letters, digits, '.', '_' and '-'")
        return value

    @field_validator("group")
    @classmethod
    def _validate_group(cls, value: str) -> str:
        _check_length(value, Constraints.GROUP_MIN_LENGTH, Constraints.GROUP_MAX_LENGTH, "Group")
        for part in value.split("."):
            _check_length(part, Constraints.DIR_MIN_LENGTH, Constraints.DIR_MAX_LENGTH, "Group part")
            if not Constraints.GROUP_PART_PATTERN.match(part):
                raise ValueError(f"{value!r} is not a valid Java identifier")
        return value

    @field_validator("version")
    @classmethod
    def _validate_version(cls, value: str) -> str:
        _check_length(
            value, Constraints.VERSION_MIN_LENGTH, Constraints.VERSION_MAX_LENGTH, "Version"
        )
        if not Constraints.VERSION_PATTERN.match(value):
            raise ValueError(f"Invalid version string: {value!r}")
        return value

    @field_validator("languages")
    @classmethod
    def _validate_languages(cls, value: tuple[Language, ...]) -> tuple[Language, ...]:
        if not value:
            raise ValueError("At least one language is required")
        order = list(Language)
        return tuple(sorted(set(value), key=order.index))

    @field_validator("git_repo")
    @classmethod
    def _validate_git_repo(cls, value: Optional[str]) -> Optional[str]:
        if value is None or value == "":
            return None
        return validate_git_url(value)

    # -- Derived values ----------------------------------------------------

    @property
    def package_path(self) -> str:
        """Group as a relative directory path (``com.example`` -> ``com/example``)."""
        return self.group.replace(".", "/")

    @property
    def license_holder(self) -> str:
        return self.copyright_holder or self.group

    @property
    def wants_source_control(self) -> bool:
        return self.git_init or self.git_repo is not None

    # -- Construction from raw options -------------------------------------

    @classmethod
    def from_options(
        cls,
        name: str | int | float | None,
        group: str | int | float | None,
        languages: str | Iterable[str | Language] | None,
        *,
        version: str | int | float | None = None,
        testing: str | TestingFramework | None = None,
        logging: str | LoggingFramework | None = None,
        license: str | License | None = None,
        repositories: str | Iterable[str | Repository] | None = None,
        git_init: bool | str | None = None,
        git_url: Optional[str] = None,
        dependencies: str | Iterable[Any] | None = None,
        gradle_plugins: str | Iterable[Any] | None = None,
        plugins: str | Iterable[str] | None = None,
        copyright_year: Optional[int] = None,
        copyright_holder: Optional[str] = None,
    ) -> "ProjectDescriptor":
        """Build a descriptor from loosely typed request options.

        Enum options are matched by name, case-insensitively.  Multi-valued
        options accept either a comma-separated string or an iterable.  A git
        URL implies ``git_init``.  Missing frameworks and license default to
        ``NONE`` and a missing version to ``0.1``.  Numeric name, group and
        version values are converted to strings.

        Raises:
            ValidationError: If any option is missing or invalid.  The
                ``field`` attribute names the offending option.
        """
        for label, value in (("name", name), ("group", group), ("languages", languages)):
            if value is None or (isinstance(value, str) and not value.strip()):
                raise ValidationError(f"Missing or empty value for <{label}>", field=label)

        git_url = git_url or None
        build_kwargs: dict[str, Any] = {
            "testing": _parse_enum(TestingFramework, testing, "testing"),
            "logging": _parse_enum(LoggingFramework, logging, "logging"),
            "project_context": tuple(
                _parse_enum(Repository, r, "repositories") for r in _split(repositories)
            ),
            "dependencies": tuple(
                _parse_dependency(d, Scope.COMPILE) for d in _split(dependencies)
            ),
            "gradle_plugins": tuple(
                _parse_dependency(d, Scope.CLASSPATH) for d in _split(gradle_plugins)
            ),
            "plugins": tuple(_split(plugins)),
        }
        kwargs: dict[str, Any] = {
            "name": _text(name),
            "group": _text(group),
            "version": _text(version) or Constraints.DEFAULT_VERSION,
            "languages": tuple(
                _parse_enum(Language, lang, "languages") for lang in _split(languages)
            ),
            "license": _parse_enum(License, license, "license"),
            "git_repo": git_url,
            "git_init": git_url is not None or _parse_bool(git_init),
            "copyright_holder": copyright_holder,
        }
        if copyright_year is not None:
            kwargs["copyright_year"] = copyright_year

        try:
            kwargs["build"] = BuildModel(**build_kwargs)
            return cls(**kwargs)
        except PydanticValidationError as exc:
            raise _convert_validation_error(exc) from exc

    @classmethod
    def from_file(cls, path: str | Path) -> "ProjectDescriptor":
        """Load descriptor options from a YAML or JSON document.

        The document is a flat mapping whose keys are the keyword arguments
        of :meth:`from_options` (``git_url``, ``repositories`` and so on).
        """
        file_path = Path(path)
        raw = file_path.read_text(encoding="utf-8")
        try:
            if file_path.suffix.lower() == ".json":
                data = json.loads(raw)
            else:
                data = yaml.safe_load(raw)
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise ValidationError(f"Cannot parse {file_path}: {exc}", field="file") from exc
        if not isinstance(data, dict):
            raise ValidationError(
                f"Descriptor file {file_path} must contain a mapping", field="file"
            )

        known = {
            "name", "group", "languages", "version", "testing", "logging",
            "license", "repositories", "git_init", "git_url", "dependencies",
            "gradle_plugins", "plugins", "copyright_year", "copyright_holder",
        }
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValidationError(
                f"Unknown descriptor option(s): {', '.join(unknown)}", field=unknown[0]
            )
        options = dict(data)
        return cls.from_options(
            options.pop("name", None),
            options.pop("group", None),
            options.pop("languages", None),
            **options,
        )


# ---------------------------------------------------------------------------
# Option parsing helpers
# ---------------------------------------------------------------------------

def _split(value: str | Iterable[Any] | None) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    if isinstance(value, dict):
        return [value]
    return list(value)


def _text(value: Any) -> Any:
    """Numbers become strings; YAML reads ``version: 1.0`` as a float."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def _parse_enum(enum_cls: type[Enum], value: Any, label: str) -> Any:
    """Match *value* against an enum's member names (or values), ignoring case."""
    if value is None or value == "":
        return enum_cls["NONE"]
    if isinstance(value, enum_cls):
        return value
    text = str(value).strip().lower()
    for member in enum_cls:
        if text in (member.name.lower(), str(member.value).lower()):
            return member
    choices = [m.name.lower() for m in enum_cls]
    raise ValidationError(
        f"One of {choices} (case insensitive) was not provided for <{label}>", field=label
    )


def _parse_bool(value: bool | str | None) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() == "true"


def _parse_dependency(value: Any, default_scope: Scope) -> Dependency:
    try:
        if isinstance(value, Dependency):
            return value
        if isinstance(value, str):
            return Dependency.parse(value, default_scope)
        if isinstance(value, dict):
            data = dict(value)
            data["scope"] = _parse_enum(Scope, data.get("scope") or default_scope.name, "scope")
            return Dependency(**data)
    except PydanticValidationError as exc:
        raise _convert_validation_error(exc) from exc
    except ValueError as exc:
        raise ValidationError(str(exc), field="dependencies") from exc
    raise ValidationError(f"Unsupported dependency value: {value!r}", field="dependencies")


def _convert_validation_error(exc: PydanticValidationError) -> ValidationError:
    first = exc.errors()[0]
    loc = ".".join(str(part) for part in first.get("loc", ()))
    message = str(first.get("msg", "Invalid value"))
    message = message.removeprefix("Value error, ")
    return ValidationError(f"Invalid value for <{loc}>: {message}", field=loc)


# ---------------------------------------------------------------------------
# Derived artifacts, render plan and report
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ResolvedArtifacts:
    """Concrete plugin, dependency and repository lists for one descriptor."""

    plugins: tuple[str, ...] = ()
    dependencies: tuple[Dependency, ...] = ()
    repositories: tuple[Repository, ...] = ()

    def by_scope(self, scope: Scope) -> list[Dependency]:
        """Dependencies declared under *scope*, in resolved order."""
        return [dep for dep in self.dependencies if dep.scope is scope]


@dataclass(frozen=True)
class FileEntry:
    """A file to write, relative to the project root."""

    path: str
    content: str

    def __post_init__(self) -> None:
        _check_relative(self.path)


@dataclass(frozen=True)
class RenderPlan:
    """In-memory description of the output tree.

    Paths are relative POSIX strings.  The plan holds no references to the
    filesystem and compares equal to any other plan with the same entries.
    """

    directories: tuple[str, ...] = ()
    files: tuple[FileEntry, ...] = ()

    def __post_init__(self) -> None:
        for directory in self.directories:
            _check_relative(directory)
        seen: set[str] = set()
        for entry in self.files:
            if entry.path in seen:
                raise ValidationError(
                    f"Duplicate file entry in render plan: {entry.path}", field="files"
                )
            seen.add(entry.path)

    def file(self, path: str) -> Optional[FileEntry]:
        """Return the entry for *path*, or ``None``."""
        for entry in self.files:
            if entry.path == path:
                return entry
        return None

    def paths(self) -> list[str]:
        """All directory and file paths, directories first."""
        return list(self.directories) + [entry.path for entry in self.files]


@dataclass
class RenderReport:
    """Absolute paths of everything written by one export."""

    root: Path
    directories: list[Path] = field(default_factory=list)
    files: list[Path] = field(default_factory=list)

    def missing(self) -> list[Path]:
        """Return every claimed path that does not exist with the claimed type."""
        bad = [d for d in self.directories if not d.is_dir()]
        bad.extend(f for f in self.files if not f.is_file())
        return bad


def _check_relative(path: str) -> None:
    pure = PurePosixPath(path)
    if not path or pure.is_absolute() or ".." in pure.parts or "\\" in path:
        raise ValidationError(f"Render plan paths must be relative: {path!r}", field="path")
