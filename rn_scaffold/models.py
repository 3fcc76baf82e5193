"""Data model for a single generation run."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import ValidationError

APPLICATION_ID_PATTERN = re.compile(r"^[A-Za-z0-9._]+$")


class PackageManager(str, Enum):
    NPM = "npm"
    YARN = "yarn"

    def install_command(self) -> list[str]:
        """Command that installs the template's own dependencies."""
        if self is PackageManager.YARN:
            return ["yarn"]
        return ["npm", "install"]

    def add_command(self, libraries: list[str] | tuple[str, ...]) -> list[str]:
        """Command that adds *libraries* to the project."""
        if self is PackageManager.YARN:
            return ["yarn", "add", *libraries]
        return ["npm", "install", *libraries]


# ---------------------------------------------------------------------------
# Answer validators (shared by the prompt layer and the model)
# ---------------------------------------------------------------------------


def validate_project_name(value: str) -> str:
    name = (value or "").strip()
    if not name:
        raise ValidationError("Project name cannot be empty")
    return name


def validate_application_id(value: str) -> str:
    app_id = value or ""
    if not APPLICATION_ID_PATTERN.fullmatch(app_id):
        raise ValidationError(
            "Application ID can only contain letters, numbers, dots, and "
            "underscores, and cannot be empty"
        )
    return app_id


def validate_libraries(selected: list[str] | tuple[str, ...], catalog: list[str]) -> tuple[str, ...]:
    """Check *selected* against *catalog*; return them de-duplicated in catalog order."""
    unknown = [lib for lib in selected if lib not in catalog]
    if unknown:
        raise ValidationError(f"Unknown libraries: {', '.join(unknown)}")
    chosen = set(selected)
    return tuple(lib for lib in catalog if lib in chosen)


def validate_package_manager(value: str | PackageManager) -> PackageManager:
    try:
        return PackageManager(value)
    except ValueError:
        raise ValidationError(
            f"Unsupported package manager '{value}' (expected npm or yarn)"
        ) from None


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class GenerationRequest(BaseModel):
    """Everything the pipeline needs to generate one project.

    Built once from the prompt answers and never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    project_name: str
    application_id: str | None = None
    selected_libraries: tuple[str, ...] = Field(default_factory=tuple)
    package_manager: PackageManager = PackageManager.NPM
    install_pods: bool = True
    target_path: Path

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        return validate_project_name(value)

    @field_validator("application_id")
    @classmethod
    def _check_application_id(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return validate_application_id(value)

    @field_validator("selected_libraries")
    @classmethod
    def _dedupe_libraries(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(dict.fromkeys(value))


@dataclass(frozen=True)
class RepoContext:
    """Directory a stage operates in.

    Passed explicitly to every stage and git call instead of living on a
    shared client.
    """

    path: Path

    def child(self, name: str) -> "RepoContext":
        return RepoContext(self.path / name)

    @property
    def git_dir(self) -> Path:
        return self.path / ".git"
