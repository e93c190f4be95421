"""Expansion of a project descriptor into concrete build artifacts.

The resolver walks the descriptor's options in a fixed order, merges each
option's catalog contribution, then appends the caller's own repositories,
dependencies and plugins.  Duplicates are dropped on a first-wins basis, so
catalog entries take precedence over a caller repeating the same coordinate.

Ordering is part of the contract: identical descriptors always resolve to
identical, identically ordered artifacts.
"""

from __future__ import annotations

from typing import Iterable

from .catalog import CATALOG, Contribution, OptionCatalog
from .models import Dependency, Language, ProjectDescriptor, Repository, ResolvedArtifacts


class _Accumulator:
    """Ordered, first-wins collection of plugins, dependencies and repositories."""

    def __init__(self) -> None:
        self.plugins: dict[str, None] = {}
        self.dependencies: dict[tuple, Dependency] = {}
        self.repositories: dict[Repository, None] = {}

    def merge(self, contribution: Contribution) -> None:
        self.add_plugins(contribution.plugins)
        self.add_dependencies(contribution.dependencies)
        self.add_repositories(contribution.repositories)

    def add_plugins(self, plugin_ids: Iterable[str]) -> None:
        for plugin_id in plugin_ids:
            self.plugins.setdefault(plugin_id, None)

    def add_dependencies(self, dependencies: Iterable[Dependency]) -> None:
        for dep in dependencies:
            self.dependencies.setdefault(dep.key, dep)

    def add_repositories(self, repositories: Iterable[Repository]) -> None:
        for repo in repositories:
            self.repositories.setdefault(repo, None)

    def freeze(self) -> ResolvedArtifacts:
        return ResolvedArtifacts(
            plugins=tuple(self.plugins),
            dependencies=tuple(self.dependencies.values()),
            repositories=tuple(self.repositories),
        )


class CompatibilityResolver:
    """Turns a :class:`ProjectDescriptor` into :class:`ResolvedArtifacts`.

    The descriptor is assumed to be valid; an option missing from the catalog
    trips an assertion rather than producing a user-facing error.
    """

    def __init__(self, catalog: OptionCatalog | None = None) -> None:
        self.catalog = catalog or CATALOG

    def resolve(self, descriptor: ProjectDescriptor) -> ResolvedArtifacts:
        acc = _Accumulator()

        # Declared enum order, never the caller's insertion order
        for language in Language:
            if language in descriptor.languages:
                acc.merge(self.catalog.contribution(language))

        acc.merge(self.catalog.contribution(descriptor.build.testing))
        acc.merge(self.catalog.contribution(descriptor.build.logging))
        acc.add_repositories(descriptor.build.project_context)

        acc.add_dependencies(descriptor.build.dependencies)
        acc.add_dependencies(descriptor.build.gradle_plugins)
        acc.add_plugins(descriptor.build.plugins)

        return acc.freeze()


def resolve(descriptor: ProjectDescriptor) -> ResolvedArtifacts:
    """Resolve *descriptor* against the default catalog."""
    return CompatibilityResolver().resolve(descriptor)
