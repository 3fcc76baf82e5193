"""Unit tests for the repository initialiser (rn_scaffold.stages.repo_init)."""

from __future__ import annotations

from pathlib import Path

import pytest

from rn_scaffold.errors import GitError
from rn_scaffold.git import GitClient
from rn_scaffold.models import RepoContext
from rn_scaffold.stages.repo_init import RepositoryInitializer


class TestRepositoryInitializer:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_init_add_commit_in_order(self, make_runner, tmp_path: Path):
        runner = make_runner()
        ctx = RepoContext(tmp_path / "MyApp")

        result = await RepositoryInitializer(GitClient(runner)).initialize(ctx)

        assert runner.commands == ["git init", "git add .", "git commit -m Initial commit"]
        assert all(call.cwd == ctx.path for call in runner.calls)
        assert result["commit_message"] == "Initial commit"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_custom_commit_message(self, make_runner, tmp_path: Path):
        runner = make_runner()
        await RepositoryInitializer(GitClient(runner), "chore: bootstrap").initialize(
            RepoContext(tmp_path)
        )
        assert runner.calls[-1].command == ["git", "commit", "-m", "chore: bootstrap"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_add_failure_stops_before_commit(self, make_runner, tmp_path: Path):
        runner = make_runner(failures={"git add": 128})
        with pytest.raises(GitError):
            await RepositoryInitializer(GitClient(runner)).initialize(RepoContext(tmp_path))
        assert runner.commands == ["git init", "git add ."]
