"""Thin git client for the clone and repository-initialisation stages.

The client keeps no working directory of its own: ``clone`` takes the
destination path and every other operation takes the ``RepoContext`` it
should run in.
"""

from __future__ import annotations

from pathlib import Path

from .errors import CloneError, GitError
from .models import RepoContext
from .runner import CommandResult, ProcessRunner


class GitClient:
    """Runs git commands through a ``ProcessRunner``."""

    def __init__(self, runner: ProcessRunner, executable: str = "git") -> None:
        self.runner = runner
        self.executable = executable

    async def _run(self, *args: str, cwd: Path | None = None) -> CommandResult:
        return await self.runner.run([self.executable, *args], cwd=cwd, capture=True)

    async def clone(self, url: str, path: str | Path) -> CommandResult:
        """Full clone of *url* into *path*.

        Raises:
            CloneError: If git exits non-zero or cannot be spawned.
        """
        result = await self._run("clone", url, str(path))
        if not result.ok:
            raise CloneError(
                f"Git clone failed (exit {result.returncode}): {result.command_line}\n{result.stderr}",
                command=result.command_line,
                returncode=result.returncode,
                stderr=result.stderr,
            )
        return result

    async def init(self, ctx: RepoContext) -> CommandResult:
        return await self._checked(ctx, "init")

    async def add(self, ctx: RepoContext, pattern: str = ".") -> CommandResult:
        return await self._checked(ctx, "add", pattern)

    async def commit(self, ctx: RepoContext, message: str) -> CommandResult:
        return await self._checked(ctx, "commit", "-m", message)

    async def _checked(self, ctx: RepoContext, *args: str) -> CommandResult:
        result = await self._run(*args, cwd=ctx.path)
        if not result.ok:
            raise GitError(
                f"Git command failed (exit {result.returncode}): {result.command_line}\n{result.stderr}",
                command=result.command_line,
                returncode=result.returncode,
                stderr=result.stderr,
            )
        return result
