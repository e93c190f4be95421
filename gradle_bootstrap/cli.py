"""Command-line entry point for Gradle Bootstrap.

Usage::

    gradle-bootstrap my-app --group com.example.app --language java,kotlin
    gradle-bootstrap my-app --group com.example.app --testing testng --zip
    gradle-bootstrap --from-file project.yaml --output ./projects
    gradle-bootstrap my-app --group com.example.app --config settings.json --zip
    gradle-bootstrap --list-options
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from .catalog import CATALOG
from .config import Config
from .errors import BootstrapError, ValidationError
from .generator import ProjectGenerator
from .models import Dependency, ProjectDescriptor, Scope
from .renderer import ProjectRenderer
from .utils import (
    console,
    plan_tree,
    print_error,
    print_report,
    print_success,
    print_summary_table,
    print_warning,
)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gradle-bootstrap",
        description="Generate a ready-to-build Gradle project skeleton",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  gradle-bootstrap my-app --group com.example --language kotlin --testing testng\n"
            "  gradle-bootstrap my-app --group com.example --git-url https://example.com/r.git\n"
            "  gradle-bootstrap --from-file project.yaml --zip\n"
        ),
    )
    parser.add_argument("name", nargs="?", help="Project name")
    parser.add_argument("--group", "-g", help="Project group / base package, e.g. com.example")
    parser.add_argument("--version", "-v", dest="project_version", help="Project version (default: 0.1)")
    parser.add_argument(
        "--language", "-l", default="java",
        help="Comma-separated languages (default: java)",
    )
    parser.add_argument("--testing", help="Testing framework (default: none)")
    parser.add_argument("--logging", help="Logging framework (default: none)")
    parser.add_argument("--license", help="License (default: none)")
    parser.add_argument(
        "--repository", "-r", action="append", default=[],
        help="Repository to declare. Repeatable.",
    )
    parser.add_argument(
        "--dependency", "-d", action="append", default=[],
        help="Compile dependency as group:artifact[:version]. Repeatable.",
    )
    parser.add_argument(
        "--test-dependency", action="append", default=[],
        help="Test dependency as group:artifact[:version]. Repeatable.",
    )
    parser.add_argument(
        "--gradle-plugin", action="append", default=[],
        help="Buildscript classpath entry as group:artifact[:version]. Repeatable.",
    )
    parser.add_argument(
        "--plugin", "-p", action="append", default=[],
        help="Plugin id to apply. Repeatable.",
    )
    parser.add_argument("--git-init", action="store_true", help="Initialize a git repository")
    parser.add_argument("--git-url", help="Remote to register as origin (implies --git-init)")
    parser.add_argument("--from-file", "-f", help="Read project options from a YAML/JSON file")
    parser.add_argument(
        "--output", "-o", default=None,
        help="Parent directory for the project (default: ./output or $GBS_OUTPUT_DIR)",
    )
    parser.add_argument(
        "--zip", nargs="?", const="", default=None, metavar="PATH",
        help="Also write a zip archive (default path: <archive_dir>/<name>.zip)",
    )
    parser.add_argument(
        "--clean", action="store_true",
        help="Delete an existing project directory before exporting",
    )
    parser.add_argument(
        "--config", "-c", default=None, metavar="PATH",
        help="Load settings from a JSON file written by --save-config (default: $GBS_* variables)",
    )
    parser.add_argument(
        "--save-config", nargs="?", const="", default=None, metavar="PATH",
        help="Write the effective settings to PATH (default: <output>/gradle-bootstrap.json)",
    )
    parser.add_argument(
        "--dry-run", action="store_true",
        help="Print the files that would be generated without writing anything",
    )
    parser.add_argument(
        "--list-options", action="store_true", help="List every recognised option value",
    )
    return parser


def descriptor_from_args(args: argparse.Namespace) -> ProjectDescriptor:
    """Build a descriptor from parsed arguments (or the file they point to)."""
    if args.from_file:
        return ProjectDescriptor.from_file(args.from_file)

    try:
        dependencies = [Dependency.parse(d, Scope.COMPILE) for d in args.dependency]
        dependencies += [Dependency.parse(d, Scope.TEST) for d in args.test_dependency]
    except ValueError as exc:
        raise ValidationError(str(exc), field="dependencies") from exc

    return ProjectDescriptor.from_options(
        args.name,
        args.group,
        args.language,
        version=args.project_version,
        testing=args.testing,
        logging=args.logging,
        license=args.license,
        repositories=args.repository,
        git_init=args.git_init,
        git_url=args.git_url,
        dependencies=dependencies,
        gradle_plugins=args.gradle_plugin,
        plugins=args.plugin,
    )


def _print_options() -> None:
    for option, info in CATALOG.options().items():
        print_summary_table(
            {"values": ", ".join(info["values"]), "default": str(info["default"])},
            title=option,
        )


def load_config(args: argparse.Namespace) -> Config:
    """Settings from ``--config`` (or the environment) with flag overrides applied.

    ``--output`` also moves the archive directory when it still sits at its
    default ``<output>/archives`` location.
    """
    config = Config.load(Path(args.config)) if args.config else Config.from_env()
    if args.output:
        derived_archive_dir = config.archive_dir == config.output_dir / "archives"
        config.output_dir = Path(args.output)
        if derived_archive_dir:
            config.archive_dir = config.output_dir / "archives"
    if args.clean:
        config.clean_destination = True
    return config


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point.  Returns the process exit code."""
    args = build_parser().parse_args(argv)

    if args.list_options:
        _print_options()
        return EXIT_OK

    try:
        descriptor = descriptor_from_args(args)
    except ValidationError as exc:
        print_error(f"Invalid project options: {exc}")
        return EXIT_INVALID
    except OSError as exc:
        print_error(f"Cannot read descriptor file: {exc}")
        return EXIT_INVALID

    if args.dry_run:
        plan = ProjectRenderer().render(descriptor)
        console.print(plan_tree(plan, label=descriptor.name))
        return EXIT_OK

    try:
        config = load_config(args)
    except (OSError, ValueError) as exc:
        print_error(f"Cannot load settings: {exc}")
        return EXIT_INVALID

    archive_path = None
    if args.zip is not None:
        archive_path = Path(args.zip) if args.zip else config.archive_path(descriptor.name)
    destination = config.project_dir(descriptor.name)
    if config.clean_destination and destination.exists():
        print_warning(f"Removing existing {destination}")

    try:
        if args.save_config is not None:
            saved = config.save(Path(args.save_config) if args.save_config else None)
            print_success(f"Settings saved to {saved}")
        if args.zip == "":
            config.ensure_directories()
        result = ProjectGenerator(config).generate(descriptor, archive_path=archive_path)
    except (BootstrapError, OSError) as exc:
        print_error(f"Generation failed: {exc}")
        return EXIT_FAILURE

    print_report(result.report)
    if result.archive is not None:
        print_success(f"Archive written to {result.archive}")
    print_success(f"Project generated at {result.report.root}")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
