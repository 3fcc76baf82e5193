"""Template fetcher: clone the template and detach it from its history."""

from __future__ import annotations

import asyncio
import shutil
from typing import Any

from rich.markup import escape

from ..errors import FilesystemError
from ..git import GitClient
from ..models import RepoContext
from ..utils import console


class TemplateFetcher:
    """Clones ``template_url`` into the target path, then drops ``.git``."""

    def __init__(self, git: GitClient, template_url: str) -> None:
        self.git = git
        self.template_url = template_url

    async def fetch(self, ctx: RepoContext) -> dict[str, Any]:
        console.print(f"  Cloning template repository [bold]{escape(self.template_url)}[/bold]...")
        await self.git.clone(self.template_url, ctx.path)

        console.print("  Removing .git directory...")
        await remove_git_metadata(ctx)

        return {"template_url": self.template_url, "path": str(ctx.path)}


async def remove_git_metadata(ctx: RepoContext) -> None:
    """Recursively delete ``<ctx.path>/.git``.

    Raises:
        FilesystemError: If the directory is missing or cannot be removed.
    """
    try:
        await asyncio.to_thread(shutil.rmtree, ctx.git_dir)
    except OSError as exc:
        raise FilesystemError(
            f"Failed to remove {ctx.git_dir}: {exc}",
        ) from exc
