"""Typed, ordered sections of a ``build.gradle`` script.

A build script is assembled from section objects that each know how to emit
their own lines, then serialized once.  Sections always appear in the same
order, so an unchanged descriptor produces a byte-identical script:

1. ``buildscript`` classpath block (third-party plugins; Gradle requires it
   to be the first statement in the script)
2. applied plugins
3. project coordinates (group and version)
4. repositories
5. dependencies, grouped by scope
6. ``test`` task bootstrap directive

Empty sections are skipped entirely.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..models import Dependency, Scope
from .templates import groovy_string

INDENT = "    "

# Order in which dependency scopes are listed inside ``dependencies { }``
SCOPE_ORDER: tuple[Scope, ...] = (
    Scope.COMPILE,
    Scope.PROVIDED,
    Scope.RUNTIME,
    Scope.TEST,
    Scope.TEST_RUNTIME,
)


def _block(name: str, body: list[str], depth: int = 0) -> list[str]:
    pad = INDENT * depth
    lines = [f"{pad}{name} {{"]
    lines.extend(f"{pad}{INDENT}{line}" if line else "" for line in body)
    lines.append(f"{pad}}}")
    return lines


def _declaration(configuration: str, dep: Dependency) -> str:
    return f"{configuration} {groovy_string(dep.notation)}"


@dataclass(frozen=True)
class BuildscriptSection:
    """Classpath entries needed before third-party plugins can be applied."""

    repositories: tuple[str, ...] = ()
    classpath: tuple[Dependency, ...] = ()

    def lines(self) -> list[str]:
        if not self.classpath:
            return []
        body: list[str] = []
        body.extend(_block("repositories", list(self.repositories)))
        body.extend(
            _block("dependencies", [_declaration(Scope.CLASSPATH.value, d) for d in self.classpath])
        )
        return _block("buildscript", body)


@dataclass(frozen=True)
class PluginsSection:
    plugin_ids: tuple[str, ...] = ()

    def lines(self) -> list[str]:
        return [f"apply plugin: {groovy_string(plugin_id)}" for plugin_id in self.plugin_ids]


@dataclass(frozen=True)
class CoordinatesSection:
    group: str
    version: str

    def lines(self) -> list[str]:
        return [
            f"group = {groovy_string(self.group)}",
            f"version = {groovy_string(self.version)}",
        ]


@dataclass(frozen=True)
class RepositoriesSection:
    calls: tuple[str, ...] = ()

    def lines(self) -> list[str]:
        if not self.calls:
            return []
        return _block("repositories", list(self.calls))


@dataclass(frozen=True)
class DependenciesSection:
    """Dependencies grouped by scope; resolver order is kept within a scope."""

    dependencies: tuple[Dependency, ...] = ()

    def lines(self) -> list[str]:
        body = [
            _declaration(scope.value, dep)
            for scope in SCOPE_ORDER
            for dep in self.dependencies
            if dep.scope is scope
        ]
        if not body:
            return []
        return _block("dependencies", body)


@dataclass(frozen=True)
class BootstrapSection:
    """Opt-in statement for frameworks Gradle does not run by default."""

    directive: str | None = None

    def lines(self) -> list[str]:
        if not self.directive:
            return []
        return _block("test", [self.directive])


@dataclass
class BuildScript:
    """An ordered collection of sections serialized into ``build.gradle``."""

    sections: list = field(default_factory=list)

    def serialize(self) -> str:
        chunks = ["\n".join(lines) for lines in (s.lines() for s in self.sections) if lines]
        return "\n\n".join(chunks) + "\n"
