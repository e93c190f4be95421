"""Gradle Bootstrap renderer -- turns descriptors into render plans.

Quick usage::

    from gradle_bootstrap.models import ProjectDescriptor
    from gradle_bootstrap.renderer import ProjectRenderer

    descriptor = ProjectDescriptor.from_options(
        "my-project", "com.example.app", "java,kotlin", testing="testng",
    )
    plan = ProjectRenderer().render(descriptor)
    print(plan.file("build.gradle").content)
"""

from gradle_bootstrap.renderer.build_script import BuildScript
from gradle_bootstrap.renderer.project_renderer import ProjectRenderer, render
from gradle_bootstrap.renderer.templates import TemplateRenderer

__all__ = [
    "BuildScript",
    "ProjectRenderer",
    "TemplateRenderer",
    "render",
]
