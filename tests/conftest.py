"""Shared pytest fixtures for the rn-scaffold test suite.

Provides reusable fixtures for:
- A recording fake process runner (no real processes are spawned)
- Clone side effects that lay out a template checkout on disk
- Configs and requests pointing at temporary directories
- Mock asyncio subprocess helpers
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from rn_scaffold.config import Config, get_variant
from rn_scaffold.models import GenerationRequest, PackageManager
from rn_scaffold.runner import CommandResult


# ---------------------------------------------------------------------------
# Fake process runner
# ---------------------------------------------------------------------------

@dataclass
class RecordedCall:
    command: list[str]
    cwd: Path | None
    capture: bool


class FakeRunner:
    """Stands in for ``ProcessRunner`` and records every command.

    Args:
        failures: Maps a command-line prefix (e.g. ``"npm install axios"``)
            to the exit code that command should report.
        on_run: Optional hook called with ``(command, cwd)`` before the
            result is produced, used to simulate side effects on disk.
    """

    def __init__(
        self,
        failures: dict[str, int] | None = None,
        on_run: Callable[[list[str], Path | None], None] | None = None,
    ) -> None:
        self.calls: list[RecordedCall] = []
        self.failures = failures or {}
        self.on_run = on_run

    async def run(
        self,
        command: list[str],
        cwd: str | Path | None = None,
        capture: bool = False,
    ) -> CommandResult:
        cwd_path = Path(cwd) if cwd is not None else None
        self.calls.append(RecordedCall(list(command), cwd_path, capture))
        if self.on_run is not None:
            self.on_run(list(command), cwd_path)

        line = " ".join(command)
        for prefix, code in self.failures.items():
            if line == prefix or line.startswith(prefix + " "):
                return CommandResult(
                    command=list(command),
                    returncode=code,
                    stderr=f"{prefix}: simulated failure",
                )
        return CommandResult(command=list(command), returncode=0)

    @property
    def commands(self) -> list[str]:
        return [" ".join(call.command) for call in self.calls]


def simulate_clone(with_ios: bool = True) -> Callable[[list[str], Path | None], None]:
    """Build an ``on_run`` hook that materialises a checkout on ``git clone``."""

    def _hook(command: list[str], cwd: Path | None) -> None:
        if command[:2] == ["git", "clone"]:
            target = Path(command[3])
            (target / ".git" / "objects").mkdir(parents=True)
            (target / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
            (target / "package.json").write_text('{"name": "template"}\n')
            if with_ios:
                (target / "ios").mkdir()

    return _hook


@pytest.fixture
def fake_runner() -> FakeRunner:
    """A runner that succeeds for every command and creates the checkout on clone."""
    return FakeRunner(on_run=simulate_clone())


@pytest.fixture
def make_runner() -> Callable[..., FakeRunner]:
    """Factory for runners with custom failures, clone layout or side-effect hook."""

    def factory(
        failures: dict[str, int] | None = None,
        with_ios: bool = True,
        on_run: Callable[[list[str], Path | None], None] | None = None,
    ) -> FakeRunner:
        return FakeRunner(failures=failures, on_run=on_run or simulate_clone(with_ios=with_ios))

    return factory


# ---------------------------------------------------------------------------
# Configs & requests
# ---------------------------------------------------------------------------

@pytest.fixture
def config(tmp_path: Path) -> Config:
    """Full-variant config rooted at tmp_path with pre-flight disabled."""
    return Config(base_dir=tmp_path, preflight=False)


@pytest.fixture
def basic_config(tmp_path: Path) -> Config:
    return Config(base_dir=tmp_path, preflight=False, variant=get_variant("basic"))


@pytest.fixture
def make_request(tmp_path: Path) -> Callable[..., GenerationRequest]:
    """Factory for requests targeting ``tmp_path / project_name``."""

    def factory(**overrides: Any) -> GenerationRequest:
        fields: dict[str, Any] = {
            "project_name": "MyApp",
            "application_id": "com.example.myapp",
            "selected_libraries": ("axios",),
            "package_manager": PackageManager.NPM,
            "install_pods": True,
        }
        fields.update(overrides)
        fields.setdefault("target_path", tmp_path / fields["project_name"])
        return GenerationRequest(**fields)

    return factory


# ---------------------------------------------------------------------------
# Mock asyncio subprocess
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with configurable
    stdout, stderr, and return codes.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(stdout="output", returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory
