"""Process runner used by every stage that shells out.

Stages never spawn processes directly; they receive a ``ProcessRunner``
and get a ``CommandResult`` back.  Tests substitute a fake runner that
records the calls instead of spawning anything.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass, field
from pathlib import Path

from .utils import run_command


@dataclass
class CommandResult:
    """Structured result of one external command."""

    command: list[str] = field(default_factory=list)
    returncode: int = 0
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def command_line(self) -> str:
        """Shell-quoted rendering of the command, for messages."""
        return shlex.join(self.command)


class ProcessRunner:
    """Runs external commands to completion, one at a time.

    With ``capture=False`` (the default) the child inherits stdin, stdout
    and stderr so the tool's own output is visible live.
    """

    def __init__(
        self,
        env: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> None:
        self.env = env
        self.timeout = timeout

    async def run(
        self,
        command: list[str],
        cwd: str | Path | None = None,
        capture: bool = False,
    ) -> CommandResult:
        returncode, stdout, stderr = await run_command(
            list(command),
            cwd=cwd,
            timeout=self.timeout,
            capture=capture,
            env=self.env,
        )
        return CommandResult(
            command=list(command),
            returncode=returncode,
            stdout=stdout,
            stderr=stderr,
        )
