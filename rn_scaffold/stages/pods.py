"""Native pod installer: ``pod install`` inside the project's ``ios/`` directory."""

from __future__ import annotations

from typing import Any

from rich.markup import escape

from ..errors import NativeInstallError
from ..models import RepoContext
from ..runner import ProcessRunner
from ..utils import console, print_warning

IOS_DIR = "ios"


class PodInstaller:
    def __init__(self, runner: ProcessRunner, command: list[str]) -> None:
        self.runner = runner
        self.command = list(command)

    async def install(self, ctx: RepoContext) -> dict[str, Any]:
        """Install CocoaPods for the generated app.

        A template without an ``ios/`` directory is reported as skipped.

        Raises:
            NativeInstallError: If the installer exits non-zero or cannot be spawned.
        """
        ios = ctx.child(IOS_DIR)
        if not ios.path.is_dir():
            print_warning(f"  No {IOS_DIR}/ directory in {escape(str(ctx.path))} -- skipping CocoaPods.")
            return {"skipped": True, "reason": f"missing {IOS_DIR}/ directory"}

        console.print("  Installing CocoaPods...")
        result = await self.runner.run(self.command, cwd=ios.path)
        if not result.ok:
            raise NativeInstallError(
                f"CocoaPods install failed (exit {result.returncode}): {result.command_line}",
                command=result.command_line,
                returncode=result.returncode,
                stderr=result.stderr,
            )
        return {"skipped": False, "path": str(ios.path)}
