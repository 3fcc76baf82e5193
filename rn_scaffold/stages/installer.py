"""Dependency installer: template dependencies, then the selected libraries."""

from __future__ import annotations

from typing import Any

from rich.markup import escape

from ..errors import InstallError
from ..models import GenerationRequest, RepoContext
from ..runner import CommandResult, ProcessRunner
from ..utils import console


class DependencyInstaller:
    """Runs the chosen package manager in the project directory.

    The add invocation only happens when at least one library was selected.
    """

    def __init__(self, runner: ProcessRunner) -> None:
        self.runner = runner

    async def install(self, ctx: RepoContext, request: GenerationRequest) -> dict[str, Any]:
        manager = request.package_manager

        console.print(f"  Installing dependencies with [bold]{manager.value}[/bold]...")
        await self._run(manager.install_command(), ctx)

        libraries = list(request.selected_libraries)
        if libraries:
            console.print(f"  Installing selected libraries: {escape(' '.join(libraries))}")
            await self._run(manager.add_command(libraries), ctx)

        return {"package_manager": manager.value, "libraries": libraries}

    async def _run(self, command: list[str], ctx: RepoContext) -> CommandResult:
        result = await self.runner.run(command, cwd=ctx.path)
        if not result.ok:
            raise InstallError(
                f"Install command failed (exit {result.returncode}): {result.command_line}",
                command=result.command_line,
                returncode=result.returncode,
                stderr=result.stderr,
            )
        return result
