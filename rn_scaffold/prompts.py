"""Prompt collector: gathers the answers for one generation run.

Interactive mode asks each question with Rich prompts and re-asks after a
rejected answer.  Non-interactive mode takes a pre-supplied answers mapping
(usually loaded from a JSON file) and raises on the first invalid answer.
"""

from __future__ import annotations

import json
import re
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt
from rich.table import Table

from .config import VariantConfig
from .errors import ValidationError
from .models import (
    GenerationRequest,
    PackageManager,
    validate_application_id,
    validate_libraries,
    validate_package_manager,
    validate_project_name,
)
from .utils import console as default_console
from .utils import print_error

T = TypeVar("T")

ANSWER_KEYS = ("project_name", "application_id", "libraries", "package_manager", "install_pods")


def parse_library_selection(raw: str | list[str], catalog: list[str]) -> tuple[str, ...]:
    """Turn a selection into catalog entries.

    *raw* is either a list of names or a string of comma/space separated
    names or 1-based catalog numbers.  Blank means no libraries.

    Examples::

        parse_library_selection("1, 3", ["axios", "redux", "zustand"]) -> ("axios", "zustand")
        parse_library_selection("redux axios", [...])                  -> ("axios", "redux")
    """
    tokens = raw if isinstance(raw, list) else [t for t in re.split(r"[,\s]+", raw) if t]
    selected: list[str] = []
    for token in tokens:
        token = str(token).strip()
        if token.isdigit():
            index = int(token)
            if not 1 <= index <= len(catalog):
                raise ValidationError(
                    f"Library number {index} is out of range (1-{len(catalog)})"
                )
            selected.append(catalog[index - 1])
        elif token:
            selected.append(token)
    return validate_libraries(selected, catalog)


def load_answers(path: str | Path) -> dict[str, Any]:
    """Load a JSON answers file for non-interactive mode.

    Raises:
        ValidationError: If the file is not a JSON object or has unknown keys.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValidationError(f"Answers file {path} must contain a JSON object")
    unknown = sorted(set(data) - set(ANSWER_KEYS))
    if unknown:
        raise ValidationError(f"Unknown answer keys in {path}: {', '.join(unknown)}")
    return data


class PromptCollector:
    """Asks the question sequence enabled by a variant.

    Order: project name, application id (if the variant has one), libraries,
    package manager, install-pods flag (if the variant has a pods stage).
    """

    def __init__(
        self,
        variant: VariantConfig,
        base_dir: Path,
        answers: dict[str, Any] | None = None,
        console: Console | None = None,
    ) -> None:
        self.variant = variant
        self.base_dir = Path(base_dir)
        self.answers = answers
        self.console = console or default_console

    @property
    def interactive(self) -> bool:
        return self.answers is None

    def collect(self) -> GenerationRequest:
        """Gather every answer and build the request.

        Raises:
            ValidationError: Non-interactive mode only, for an invalid answer.
            KeyboardInterrupt, EOFError: If the user aborts an interactive prompt.
        """
        if self.interactive:
            fields = self._collect_interactive()
        else:
            fields = self._collect_from_answers(self.answers or {})

        return GenerationRequest(
            target_path=self.base_dir / fields["project_name"],
            **fields,
        )

    # ------------------------------------------------------------------
    # Interactive
    # ------------------------------------------------------------------

    def _collect_interactive(self) -> dict[str, Any]:
        fields: dict[str, Any] = {}
        fields["project_name"] = self._ask_until_valid(
            lambda: Prompt.ask("Enter the project name", console=self.console),
            validate_project_name,
        )

        if self.variant.include_application_id:
            fields["application_id"] = self._ask_until_valid(
                lambda: Prompt.ask(
                    "Enter the application ID (e.g., com.example.app)", console=self.console
                ),
                validate_application_id,
            )

        catalog = self.variant.libraries_catalog
        self._show_catalog(catalog)
        fields["selected_libraries"] = self._ask_until_valid(
            lambda: Prompt.ask(
                "Select libraries to install (numbers or names, blank for none)",
                default="",
                show_default=False,
                console=self.console,
            ),
            lambda raw: parse_library_selection(raw, catalog),
        )

        fields["package_manager"] = self._ask_until_valid(
            lambda: Prompt.ask(
                "Choose a package manager",
                choices=[pm.value for pm in PackageManager],
                default=PackageManager.NPM.value,
                console=self.console,
            ),
            validate_package_manager,
        )

        fields["install_pods"] = False
        if self.variant.include_pods_stage:
            fields["install_pods"] = Confirm.ask(
                "Do you want to install CocoaPods for iOS?",
                default=True,
                console=self.console,
            )
        return fields

    def _ask_until_valid(self, ask: Callable[[], str], validate: Callable[[str], T]) -> T:
        while True:
            raw = ask()
            try:
                return validate(raw)
            except ValidationError as exc:
                print_error(escape(str(exc)))

    def _show_catalog(self, catalog: list[str]) -> None:
        table = Table(title="Available libraries", show_header=True, header_style="bold cyan")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Library")
        for index, name in enumerate(catalog, start=1):
            table.add_row(str(index), name)
        self.console.print(table)

    # ------------------------------------------------------------------
    # Non-interactive
    # ------------------------------------------------------------------

    def _collect_from_answers(self, answers: dict[str, Any]) -> dict[str, Any]:
        fields: dict[str, Any] = {
            "project_name": validate_project_name(answers.get("project_name", "")),
        }
        if self.variant.include_application_id:
            fields["application_id"] = validate_application_id(answers.get("application_id", ""))

        fields["selected_libraries"] = parse_library_selection(
            answers.get("libraries") or [], self.variant.libraries_catalog
        )
        fields["package_manager"] = validate_package_manager(
            answers.get("package_manager", PackageManager.NPM.value)
        )

        install_pods = answers.get("install_pods", True)
        if not isinstance(install_pods, bool):
            raise ValidationError(f"install_pods must be true or false, got {install_pods!r}")
        fields["install_pods"] = install_pods and self.variant.include_pods_stage
        return fields
