"""Repository initialiser: fresh git history for the generated project."""

from __future__ import annotations

from typing import Any

from ..git import GitClient
from ..models import RepoContext
from ..utils import console


class RepositoryInitializer:
    def __init__(self, git: GitClient, commit_message: str = "Initial commit") -> None:
        self.git = git
        self.commit_message = commit_message

    async def initialize(self, ctx: RepoContext) -> dict[str, Any]:
        """``git init``, ``git add .`` and a single commit in *ctx*.

        Raises:
            GitError: On the first git command that fails.
        """
        console.print("  Initializing new git repository...")
        await self.git.init(ctx)
        await self.git.add(ctx, ".")
        await self.git.commit(ctx, self.commit_message)
        return {"path": str(ctx.path), "commit_message": self.commit_message}
