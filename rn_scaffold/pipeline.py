"""rn-scaffold pipeline orchestrator.

Implements the six-stage project generation pipeline:

Stage 1: PROMPT    -- Collect project name, application id, libraries, package manager.
Stage 2: FETCH     -- Clone the template repository and drop its git history.
Stage 3: RENAME    -- Run react-native-rename with the project name and id.
Stage 4: INSTALL   -- Install dependencies, then the selected libraries.
Stage 5: PODS      -- CocoaPods install in ios/ (optional).
Stage 6: REPO INIT -- git init, add and the initial commit.

Usage::

    create-rn-project
    create-rn-project --variant basic
    create-rn-project --answers answers.json --skip-preflight
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import time
import traceback
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone
from typing import Any

from rich.markup import escape
from rich.panel import Panel

from .config import VARIANTS, Config, get_variant
from .errors import RenameError, ScaffoldError
from .git import GitClient
from .models import GenerationRequest, RepoContext
from .preflight import run_preflight
from .prompts import PromptCollector, load_answers
from .runner import ProcessRunner
from .stages import (
    DependencyInstaller,
    PodInstaller,
    Renamer,
    RepositoryInitializer,
    TemplateFetcher,
)
from .utils import (
    STAGE_NAMES,
    console,
    err_console,
    format_duration,
    print_error,
    print_stage_header,
    print_success,
    print_summary_table,
    print_warning,
)


class Pipeline:
    """Drives the generation stages in order.

    Attributes:
        config: Global configuration.
        runner: Process runner shared by every stage that shells out.
        state: In-memory record of what each stage did.  Returned from
            ``run``/``generate`` and never written to disk.
    """

    def __init__(self, config: Config, runner: ProcessRunner | None = None) -> None:
        self.config = config
        self.runner = runner or ProcessRunner()
        self.git = GitClient(self.runner, config.commands.git)

        self.fetcher = TemplateFetcher(self.git, config.template_url)
        self.renamer = Renamer(self.runner, config.commands.rename)
        self.installer = DependencyInstaller(self.runner)
        self.pod_installer = PodInstaller(self.runner, config.commands.pods)
        self.repo_initializer = RepositoryInitializer(self.git, config.commit_message)

        self.state: dict[str, Any] = {
            "started_at": datetime.now(timezone.utc).isoformat(),
            "stages_completed": [],
            "stages_skipped": [],
            "stages_failed": [],
            "success": False,
        }

    async def run(self, collector: PromptCollector) -> dict[str, Any]:
        """Collect the answers, run pre-flight checks, then generate."""
        print_stage_header(1, STAGE_NAMES[1])
        request = collector.collect()
        self.state["stage1"] = request.model_dump(mode="json")
        self.state["stages_completed"].append(1)

        if self.config.preflight:
            self.state["preflight_warnings"] = await run_preflight(self.config, request)

        return await self.generate(request)

    async def generate(self, request: GenerationRequest) -> dict[str, Any]:
        """Run stages 2-6 for an already collected request.

        A rename failure terminates the process with exit status 1.  Any
        other stage error propagates to the caller.
        """
        pipeline_start = time.monotonic()
        ctx = RepoContext(request.target_path)

        console.print(
            Panel(
                f"[bold bright_cyan]rn-scaffold[/bold bright_cyan]\n"
                f"Project  : {escape(request.project_name)}\n"
                f"Target   : {escape(str(request.target_path))}\n"
                f"Template : {escape(self.config.template_url)}",
                title="[bold]Generation Start[/bold]",
                border_style="bright_cyan",
            )
        )

        await self._stage(2, lambda: self.fetcher.fetch(ctx))

        try:
            await self._stage(3, lambda: self.renamer.rename(ctx, request))
        except RenameError as exc:
            print_error(escape(str(exc)))
            sys.exit(1)

        await self._stage(4, lambda: self.installer.install(ctx, request))

        if request.install_pods and self.config.variant.include_pods_stage:
            result = await self._stage(5, lambda: self.pod_installer.install(ctx))
            if result.get("skipped"):
                self.state["stages_completed"].remove(5)
                self.state["stages_skipped"].append(5)
        else:
            self.state["stages_skipped"].append(5)

        await self._stage(6, lambda: self.repo_initializer.initialize(ctx))

        total_elapsed = time.monotonic() - pipeline_start
        self.state["success"] = True
        self.state["total_duration"] = format_duration(total_elapsed)
        self.state["finished_at"] = datetime.now(timezone.utc).isoformat()
        self._print_final_summary(request)
        return self.state

    async def _stage(
        self, stage: int, action: Callable[[], Awaitable[dict[str, Any]]]
    ) -> dict[str, Any]:
        name = STAGE_NAMES[stage]
        print_stage_header(stage, name)
        stage_start = time.monotonic()
        try:
            result = await action()
        except Exception as exc:
            self.state["stages_failed"].append(stage)
            self.state[f"stage{stage}_error"] = str(exc)
            raise

        elapsed = time.monotonic() - stage_start
        self.state[f"stage{stage}"] = result
        self.state["stages_completed"].append(stage)
        print_success(f"Stage {stage} ({name}) completed in {format_duration(elapsed)}")
        return result

    def _print_final_summary(self, request: GenerationRequest) -> None:
        skipped = self.state["stages_skipped"]
        print_summary_table(
            {
                "Project": request.project_name,
                "Application ID": request.application_id or "-",
                "Location": str(request.target_path),
                "Package manager": request.package_manager.value,
                "Libraries": ", ".join(request.selected_libraries) or "-",
                "Skipped stages": ", ".join(STAGE_NAMES[s] for s in skipped) or "-",
                "Duration": self.state.get("total_duration", "-"),
            },
            title="Generation Summary",
        )


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-rn-project",
        description="Create a React Native project from the template repository",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-rn-project\n"
            "  create-rn-project --variant basic\n"
            "  create-rn-project --answers answers.json --skip-preflight\n"
        ),
    )
    parser.add_argument(
        "--answers",
        default=None,
        help="JSON file with pre-supplied answers (non-interactive mode)",
    )
    parser.add_argument(
        "--variant",
        choices=sorted(VARIANTS),
        default=None,
        help="Prompt/stage variant (default: full, or $RN_VARIANT)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Load configuration from a JSON file instead of the environment",
    )
    parser.add_argument(
        "--skip-preflight",
        action="store_true",
        help="Do not run pre-flight checks",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-rn-project`` / ``python -m rn_scaffold``."""
    args = build_parser().parse_args(argv)

    try:
        config = Config.load(args.config) if args.config else Config.from_env()
        if args.variant:
            config.variant = get_variant(args.variant)
        if args.skip_preflight:
            config.preflight = False
        answers = load_answers(args.answers) if args.answers else None
    except (ValueError, OSError) as exc:
        print_error(f"Error: {escape(str(exc))}")
        sys.exit(1)

    collector = PromptCollector(config.variant, config.base_dir, answers=answers)
    pipeline = Pipeline(config)

    try:
        asyncio.run(pipeline.run(collector))
    except (KeyboardInterrupt, EOFError):
        print_warning("\nAborted.")
        sys.exit(130)
    except ScaffoldError as exc:
        print_error(f"Error: {escape(str(exc))}")
        sys.exit(1)
    except Exception as exc:
        print_error(f"Error: {escape(str(exc))}")
        err_console.print(f"[dim]{escape(traceback.format_exc())}[/dim]")
        sys.exit(1)

    print_success("Project setup complete!")


if __name__ == "__main__":
    main()
