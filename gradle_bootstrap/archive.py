"""Packages a materialized project directory into a zip archive.

Members are named relative to the project root (the root itself is not a
member) and added in sorted relative-path order, so the member list does not
depend on how the platform happens to order directory listings.  Every
directory gets its own entry, which keeps empty source roots in the archive.
"""

from __future__ import annotations

import zipfile
from pathlib import Path

from .errors import ArchiveError
from .utils import walk_sorted


class ArchiveBuilder:
    """Builds zip archives from exported project directories."""

    def __init__(self, compression: int = zipfile.ZIP_DEFLATED) -> None:
        self.compression = compression

    def build(self, root: str | Path, destination: str | Path) -> Path:
        """Zip everything under *root* into *destination*.

        Args:
            root: Exported project directory.
            destination: Archive file to create; missing parent directories
                are created.  An existing file is replaced.

        Returns:
            The archive path.

        Raises:
            ArchiveError: If *root* is not a directory or the archive cannot
                be written.
        """
        root_path = Path(root).absolute()
        archive_path = Path(destination).absolute()
        if not root_path.is_dir():
            raise ArchiveError(f"Project root does not exist: {root_path}", path=root_path)

        try:
            archive_path.parent.mkdir(parents=True, exist_ok=True)
            with zipfile.ZipFile(archive_path, "w", self.compression) as zf:
                for path in walk_sorted(root_path):
                    if path == archive_path:
                        continue
                    arc_name = path.relative_to(root_path).as_posix()
                    if path.is_dir():
                        zf.write(path, arc_name + "/")
                    else:
                        zf.write(path, arc_name)
        except OSError as exc:
            raise ArchiveError(
                f"Cannot create archive {archive_path}: {exc.strerror or exc}", path=archive_path
            ) from exc

        return archive_path


def archive(root: str | Path, destination_archive_path: str | Path) -> Path:
    """Zip *root* into *destination_archive_path*."""
    return ArchiveBuilder().build(root, destination_archive_path)
