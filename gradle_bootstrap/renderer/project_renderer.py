"""Pure transform from a project descriptor to an in-memory render plan.

``ProjectRenderer.render`` never touches the output filesystem: it computes
the directory layout and the full content of every file, and hands back a
:class:`~gradle_bootstrap.models.RenderPlan` that the exporter materializes.
Rendering the same descriptor twice yields equal plans.
"""

from __future__ import annotations

from typing import Any, Optional

from ..catalog import CATALOG, OptionCatalog
from ..models import (
    FileEntry,
    ProjectDescriptor,
    RenderPlan,
    Repository,
    ResolvedArtifacts,
    Scope,
)
from ..resolver import CompatibilityResolver
from .build_script import (
    BootstrapSection,
    BuildScript,
    BuildscriptSection,
    CoordinatesSection,
    DependenciesSection,
    PluginsSection,
    RepositoriesSection,
)
from .templates import TemplateRenderer

BUILD_SCRIPT = "build.gradle"
SETTINGS_SCRIPT = "settings.gradle"
LICENSE_FILE = "LICENSE"
GITIGNORE_FILE = ".gitignore"


class ProjectRenderer:
    """Builds a :class:`RenderPlan` for a descriptor.

    Produces, in this order:
    - ``src/main/<lang>/<package>`` and ``src/test/<lang>/<package>`` per language
    - ``build.gradle`` composed from ordered sections
    - ``settings.gradle`` naming the root project
    - ``LICENSE`` when a license other than ``NONE`` was chosen
    - ``.gitignore`` when version control was requested
    - framework bootstrap files contributed by the catalog
    """

    def __init__(
        self,
        catalog: OptionCatalog | None = None,
        templates: TemplateRenderer | None = None,
    ) -> None:
        self.catalog = catalog or CATALOG
        self.templates = templates or TemplateRenderer()
        self.resolver = CompatibilityResolver(self.catalog)

    # -- Public API --------------------------------------------------------

    def render(
        self,
        descriptor: ProjectDescriptor,
        artifacts: Optional[ResolvedArtifacts] = None,
    ) -> RenderPlan:
        """Render *descriptor* into a plan.

        Args:
            descriptor: The validated project descriptor.
            artifacts: Pre-resolved artifacts.  Resolved from the descriptor
                when omitted.

        Returns:
            The complete render plan.
        """
        if artifacts is None:
            artifacts = self.resolver.resolve(descriptor)
        context = self._build_context(descriptor)

        files = [
            FileEntry(BUILD_SCRIPT, self.build_script(descriptor, artifacts)),
            FileEntry(SETTINGS_SCRIPT, self.templates.render("settings.gradle.j2", context)),
        ]

        license_template = self.catalog.license_template(descriptor.license)
        if license_template is not None:
            files.append(FileEntry(LICENSE_FILE, self.templates.render(license_template, context)))

        if descriptor.wants_source_control:
            files.append(FileEntry(GITIGNORE_FILE, self.templates.render("gitignore.j2", context)))

        for option in (descriptor.build.testing, descriptor.build.logging):
            for output_path, template_name in self.catalog.contribution(option).templates:
                files.append(FileEntry(output_path, self.templates.render(template_name, context)))

        return RenderPlan(
            directories=tuple(self._source_directories(descriptor)),
            files=tuple(files),
        )

    def build_script(self, descriptor: ProjectDescriptor, artifacts: ResolvedArtifacts) -> str:
        """Compose the ``build.gradle`` text for *descriptor*."""
        repository_calls = tuple(
            self.catalog.repository_call(repo) for repo in artifacts.repositories
        )
        directive = self.catalog.contribution(descriptor.build.testing).test_directive

        script = BuildScript(sections=[
            BuildscriptSection(
                repositories=repository_calls
                or (self.catalog.repository_call(Repository.MAVEN_CENTRAL),),
                classpath=tuple(artifacts.by_scope(Scope.CLASSPATH)),
            ),
            PluginsSection(artifacts.plugins),
            CoordinatesSection(descriptor.group, descriptor.version),
            RepositoriesSection(repository_calls),
            DependenciesSection(
                tuple(d for d in artifacts.dependencies if d.scope is not Scope.CLASSPATH)
            ),
            BootstrapSection(directive),
        ])
        return script.serialize()

    # -- Helpers -----------------------------------------------------------

    def _source_directories(self, descriptor: ProjectDescriptor) -> list[str]:
        """One main and one test root per language, each under the group package.

        A testing framework written in another language (Spock specs are
        Groovy) adds a test root for that language after the others.
        """
        directories: list[str] = []
        for language in descriptor.languages:
            root = self.catalog.source_root(language)
            directories.append(f"src/main/{root}/{descriptor.package_path}")
            directories.append(f"src/test/{root}/{descriptor.package_path}")
        testing = self.catalog.contribution(descriptor.build.testing)
        for language in testing.test_languages:
            if language not in descriptor.languages:
                root = self.catalog.source_root(language)
                directories.append(f"src/test/{root}/{descriptor.package_path}")
        return directories

    @staticmethod
    def _build_context(descriptor: ProjectDescriptor) -> dict[str, Any]:
        """Build the Jinja2 template context from the descriptor."""
        return {
            "name": descriptor.name,
            "group": descriptor.group,
            "version": descriptor.version,
            "package_path": descriptor.package_path,
            "year": descriptor.copyright_year,
            "holder": descriptor.license_holder,
            "languages": [lang.value for lang in descriptor.languages],
        }


def render(descriptor: ProjectDescriptor) -> RenderPlan:
    """Render *descriptor* with the default catalog and templates."""
    return ProjectRenderer().render(descriptor)
