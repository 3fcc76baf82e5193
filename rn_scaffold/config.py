"""rn-scaffold configuration.

Typed configuration for the generation pipeline.  All settings use Pydantic
v2 models so they are validated at construction time and can be serialised
to/from JSON or read from environment variables.
"""

from __future__ import annotations

import os
import shlex
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

TEMPLATE_REPO = "https://github.com/chernikovichAndrey/react-native-project-template"

FULL_LIBRARIES: list[str] = [
    "axios",
    "redux",
    "zustand",
    "mobx",
    "react-native-reanimated",
    "react-native-mmkv",
    "@shopify/flash-list",
]

BASIC_LIBRARIES: list[str] = [
    "axios",
    "redux",
    "zustand",
    "mobx",
]


class VariantConfig(BaseModel):
    """Which prompts and stages are enabled, and the library catalog offered."""

    name: str = Field(default="full")
    include_application_id: bool = Field(
        default=True, description="Ask for a bundle/package id and pass it to the renamer"
    )
    libraries_catalog: list[str] = Field(default_factory=lambda: list(FULL_LIBRARIES))
    include_pods_stage: bool = Field(
        default=True, description="Offer the CocoaPods install stage"
    )


VARIANTS: dict[str, VariantConfig] = {
    "full": VariantConfig(
        name="full",
        include_application_id=True,
        libraries_catalog=list(FULL_LIBRARIES),
        include_pods_stage=True,
    ),
    "basic": VariantConfig(
        name="basic",
        include_application_id=False,
        libraries_catalog=list(BASIC_LIBRARIES),
        include_pods_stage=True,
    ),
}


def get_variant(name: str) -> VariantConfig:
    """Return a copy of a built-in variant.

    Raises:
        ValueError: If *name* is not a known variant.
    """
    try:
        return VARIANTS[name].model_copy(deep=True)
    except KeyError:
        known = ", ".join(sorted(VARIANTS))
        raise ValueError(f"Unknown variant '{name}' (expected one of: {known})") from None


class CommandConfig(BaseModel):
    """Argument vectors for the external tools the pipeline drives."""

    git: str = Field(default="git")
    rename: list[str] = Field(default_factory=lambda: ["npx", "react-native-rename@latest"])
    pods: list[str] = Field(default_factory=lambda: ["pod", "install"])


class Config(BaseModel):
    """Global rn-scaffold configuration.

    Created once by the CLI entry point and passed to ``Pipeline``.
    """

    template_url: str = Field(default=TEMPLATE_REPO)
    variant: VariantConfig = Field(default_factory=lambda: get_variant("full"))
    commands: CommandConfig = Field(default_factory=CommandConfig)
    commit_message: str = Field(default="Initial commit", min_length=1)
    base_dir: Path = Field(default_factory=Path.cwd)
    preflight: bool = Field(default=True)
    preflight_timeout: float = Field(default=5.0, gt=0, description="Template probe timeout in seconds")

    def target_path(self, project_name: str) -> Path:
        """Directory the project named *project_name* is generated into."""
        return self.base_dir / project_name

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            RN_TEMPLATE_URL, RN_VARIANT, RN_COMMIT_MESSAGE, RN_BASE_DIR,
            RN_GIT, RN_RENAME_COMMAND, RN_POD_COMMAND, RN_SKIP_PREFLIGHT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("RN_TEMPLATE_URL"):
            kwargs["template_url"] = os.environ["RN_TEMPLATE_URL"]
        if os.environ.get("RN_VARIANT"):
            kwargs["variant"] = get_variant(os.environ["RN_VARIANT"])
        if os.environ.get("RN_COMMIT_MESSAGE"):
            kwargs["commit_message"] = os.environ["RN_COMMIT_MESSAGE"]
        if os.environ.get("RN_BASE_DIR"):
            kwargs["base_dir"] = Path(os.environ["RN_BASE_DIR"])
        if os.environ.get("RN_SKIP_PREFLIGHT", "").lower() in ("1", "true", "yes"):
            kwargs["preflight"] = False

        command_kwargs: dict[str, Any] = {}
        if os.environ.get("RN_GIT"):
            command_kwargs["git"] = os.environ["RN_GIT"]
        if os.environ.get("RN_RENAME_COMMAND"):
            command_kwargs["rename"] = shlex.split(os.environ["RN_RENAME_COMMAND"])
        if os.environ.get("RN_POD_COMMAND"):
            command_kwargs["pods"] = shlex.split(os.environ["RN_POD_COMMAND"])

        return cls(commands=CommandConfig(**command_kwargs), **kwargs)
