"""Materializes a render plan onto disk.

The exporter creates the destination root and every directory the plan
needs before writing a single file, then writes each file's content
verbatim.  Existing content is overwritten rather than treated as an error,
so exporting the same plan twice is idempotent; callers that want a clean
slate must clear the destination themselves.  There is no rollback: a
failure part-way through leaves whatever was already written.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from .errors import ExportError
from .models import RenderPlan, RenderReport
from .utils import clear_path, ensure_dir


class Exporter:
    """Writes a :class:`RenderPlan` below a destination directory."""

    def export(self, plan: RenderPlan, destination_root: str | Path) -> RenderReport:
        """Write *plan* under *destination_root*.

        Args:
            plan: The plan to materialize.
            destination_root: Project root directory.  Created if missing.

        Returns:
            A report listing, once each, the absolute path of every
            directory ensured and every file written.

        Raises:
            ExportError: If a directory or file cannot be written.  The
                ``path`` attribute holds the offending path.
        """
        root = Path(destination_root).absolute()
        report = RenderReport(root=root)

        for directory in self._directories(plan, root):
            try:
                ensure_dir(directory)
            except OSError as exc:
                raise ExportError(
                    f"Cannot create directory {directory}: {exc.strerror or exc}", path=directory
                ) from exc
            report.directories.append(directory)

        for entry in plan.files:
            target = root / PurePosixPath(entry.path)
            try:
                if target.is_dir():
                    clear_path(target)
                target.write_bytes(entry.content.encode("utf-8"))
            except OSError as exc:
                raise ExportError(
                    f"Cannot write file {target}: {exc.strerror or exc}", path=target
                ) from exc
            report.files.append(target)

        return report

    @staticmethod
    def _directories(plan: RenderPlan, root: Path) -> list[Path]:
        """Root first, then every plan directory and file parent, parents before children."""
        ordered: dict[Path, None] = {root: None}
        wanted = [PurePosixPath(d) for d in plan.directories]
        wanted.extend(PurePosixPath(f.path).parent for f in plan.files)
        for relative in wanted:
            # PurePosixPath.parents runs child -> root; create root -> child
            for ancestor in reversed([relative, *relative.parents]):
                if str(ancestor) != ".":
                    ordered.setdefault(root / ancestor, None)
        return list(ordered)


def export(plan: RenderPlan, destination_root: str | Path) -> RenderReport:
    """Write *plan* under *destination_root* and return the report."""
    return Exporter().export(plan, destination_root)
