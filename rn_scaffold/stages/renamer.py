"""Renamer: run react-native-rename inside the freshly cloned template."""

from __future__ import annotations

from typing import Any

from rich.markup import escape

from ..errors import RenameError
from ..models import GenerationRequest, RepoContext
from ..runner import ProcessRunner
from ..utils import console


class Renamer:
    """Invokes the external rename utility with the project name and id."""

    def __init__(self, runner: ProcessRunner, command: list[str]) -> None:
        self.runner = runner
        self.command = list(command)

    def build_command(self, request: GenerationRequest) -> list[str]:
        cmd = [*self.command, request.project_name]
        if request.application_id is not None:
            cmd += ["-b", request.application_id]
        return cmd

    async def rename(self, ctx: RepoContext, request: GenerationRequest) -> dict[str, Any]:
        """Rename the project in place.

        Raises:
            RenameError: If the utility exits non-zero or cannot be spawned.
        """
        console.print(f"  Renaming project to [bold]{escape(request.project_name)}[/bold]...")
        result = await self.runner.run(self.build_command(request), cwd=ctx.path)
        if not result.ok:
            raise RenameError(
                f"Failed to rename project (exit {result.returncode}): {result.command_line}"
                + (f"\n{result.stderr}" if result.stderr else ""),
                command=result.command_line,
                returncode=result.returncode,
                stderr=result.stderr,
            )
        return {
            "project_name": request.project_name,
            "application_id": request.application_id,
        }
