"""Git repository initialization for generated projects.

Initializes a repository in an exported project and registers the
``origin`` remote.  Nothing is fetched or pushed, so no network access
happens here.  Running the initializer again on the same directory is safe:
``git init`` reinitializes in place and an existing ``origin`` is updated
rather than duplicated.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional

from .errors import ConfigurationError
from .models import validate_git_url
from .utils import console

REMOTE_NAME = "origin"


def _run_git(*args: str, cwd: str | Path, git: str = "git") -> subprocess.CompletedProcess:
    """Run a git command and return the completed process.

    Raises ConfigurationError if git is missing or exits non-zero.
    """
    cmd = [git, *args]
    cmd_str = " ".join(cmd)
    try:
        result = subprocess.run(
            cmd,
            cwd=str(cwd),
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        raise ConfigurationError(
            f"Unable to run git ({exc.strerror or exc}): {cmd_str}", command=cmd_str
        ) from exc

    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        raise ConfigurationError(
            f"Git command failed (exit {result.returncode}): {cmd_str}\n{stderr}",
            command=cmd_str,
            stderr=stderr,
        )
    return result


class SourceControlInitializer:
    """Sets up a git repository and remote in a project directory."""

    def __init__(self, git_executable: str = "git") -> None:
        self.git = git_executable

    def initialize(
        self,
        root: str | Path,
        remote_url: Optional[str] = None,
        init: bool = False,
    ) -> bool:
        """Initialize version control in *root*.

        Does nothing when *init* is false and no *remote_url* is given.
        Otherwise runs ``git init`` and, if a URL is given, points
        ``origin`` at it.

        Args:
            root: Existing project directory.
            remote_url: URL to register as ``origin``.
            init: Initialize even without a remote.

        Returns:
            ``True`` if a repository was initialized, ``False`` for the no-op.

        Raises:
            ConfigurationError: If the URL is malformed or a git command fails.
        """
        remote_url = remote_url or None
        if not init and remote_url is None:
            return False

        if remote_url is not None:
            try:
                validate_git_url(remote_url)
            except ValueError as exc:
                raise ConfigurationError(f"Invalid remote URL {remote_url!r}: {exc}") from exc

        root_path = Path(root)
        if not root_path.is_dir():
            raise ConfigurationError(f"Project root does not exist: {root_path}")

        console.print(f"[cyan]Initializing git repository[/cyan] in [bold]{root_path}[/bold]")
        _run_git("init", "--quiet", cwd=root_path, git=self.git)

        if remote_url is not None:
            self._configure_remote(root_path, remote_url)
        return True

    def remote_url(self, root: str | Path, name: str = REMOTE_NAME) -> Optional[str]:
        """Return the URL of remote *name*, or ``None`` if it is not configured."""
        result = _run_git("remote", cwd=root, git=self.git)
        if name not in result.stdout.split():
            return None
        return _run_git("remote", "get-url", name, cwd=root, git=self.git).stdout.strip()

    def _configure_remote(self, root: Path, url: str) -> None:
        current = self.remote_url(root)
        if current == url:
            return
        if current is None:
            _run_git("remote", "add", REMOTE_NAME, url, cwd=root, git=self.git)
        else:
            _run_git("remote", "set-url", REMOTE_NAME, url, cwd=root, git=self.git)
        console.print(f"[green]Remote[/green] {REMOTE_NAME} -> {url}")


def init_source_control(
    root: str | Path,
    remote_url: Optional[str] = None,
    init: bool = False,
) -> bool:
    """Initialize git in *root* with the default executable."""
    return SourceControlInitializer().initialize(root, remote_url, init)
