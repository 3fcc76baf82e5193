"""Unit tests for the generation data model (rn_scaffold.models)."""

from __future__ import annotations

from pathlib import Path

import pydantic
import pytest

from rn_scaffold.errors import ScaffoldError, ValidationError
from rn_scaffold.models import (
    GenerationRequest,
    PackageManager,
    RepoContext,
    validate_application_id,
    validate_libraries,
    validate_package_manager,
    validate_project_name,
)

CATALOG = ["axios", "redux", "zustand"]


class TestPackageManager:
    @pytest.mark.unit
    def test_npm_commands(self):
        assert PackageManager.NPM.install_command() == ["npm", "install"]
        assert PackageManager.NPM.add_command(["axios", "redux"]) == ["npm", "install", "axios", "redux"]

    @pytest.mark.unit
    def test_yarn_commands(self):
        assert PackageManager.YARN.install_command() == ["yarn"]
        assert PackageManager.YARN.add_command(["axios"]) == ["yarn", "add", "axios"]

    @pytest.mark.unit
    def test_yarn_never_uses_npm(self):
        commands = PackageManager.YARN.install_command() + PackageManager.YARN.add_command(["x"])
        assert "npm" not in commands


class TestValidators:
    @pytest.mark.unit
    def test_project_name_stripped(self):
        assert validate_project_name("  MyApp ") == "MyApp"

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_empty_project_name_rejected(self, value):
        with pytest.raises(ValidationError, match="cannot be empty"):
            validate_project_name(value)

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["com.example.myapp", "app_1", "A.B.C"])
    def test_valid_application_ids(self, value):
        assert validate_application_id(value) == value

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value",
        ["", "com-example", "com.example app", "com/example", "café.app", "a$b", " com.x ", "com.x\n"],
    )
    def test_invalid_application_ids(self, value):
        with pytest.raises(ValidationError, match="Application ID"):
            validate_application_id(value)

    @pytest.mark.unit
    def test_libraries_returned_in_catalog_order_without_duplicates(self):
        assert validate_libraries(["zustand", "axios", "axios"], CATALOG) == ("axios", "zustand")

    @pytest.mark.unit
    def test_empty_library_selection_is_valid(self):
        assert validate_libraries([], CATALOG) == ()

    @pytest.mark.unit
    def test_unknown_library_rejected(self):
        with pytest.raises(ValidationError, match="Unknown libraries: lodash"):
            validate_libraries(["axios", "lodash"], CATALOG)

    @pytest.mark.unit
    def test_package_manager(self):
        assert validate_package_manager("yarn") is PackageManager.YARN
        with pytest.raises(ValidationError, match="Unsupported package manager"):
            validate_package_manager("pnpm")

    @pytest.mark.unit
    def test_validation_error_is_a_value_error(self):
        assert issubclass(ValidationError, ValueError)
        assert issubclass(ValidationError, ScaffoldError)


class TestGenerationRequest:
    @pytest.mark.unit
    def test_defaults(self, tmp_path: Path):
        request = GenerationRequest(project_name="MyApp", target_path=tmp_path / "MyApp")
        assert request.application_id is None
        assert request.selected_libraries == ()
        assert request.package_manager is PackageManager.NPM
        assert request.install_pods is True

    @pytest.mark.unit
    def test_rejects_bad_application_id(self, tmp_path: Path):
        with pytest.raises(pydantic.ValidationError):
            GenerationRequest(
                project_name="MyApp",
                application_id="not valid!",
                target_path=tmp_path / "MyApp",
            )

    @pytest.mark.unit
    def test_rejects_empty_project_name(self, tmp_path: Path):
        with pytest.raises(pydantic.ValidationError):
            GenerationRequest(project_name="", target_path=tmp_path)

    @pytest.mark.unit
    def test_frozen(self, make_request):
        request = make_request()
        with pytest.raises(pydantic.ValidationError):
            request.project_name = "Other"

    @pytest.mark.unit
    def test_libraries_deduplicated(self, make_request):
        request = make_request(selected_libraries=("axios", "redux", "axios"))
        assert request.selected_libraries == ("axios", "redux")


class TestRepoContext:
    @pytest.mark.unit
    def test_child_and_git_dir(self, tmp_path: Path):
        ctx = RepoContext(tmp_path / "MyApp")
        assert ctx.child("ios").path == tmp_path / "MyApp" / "ios"
        assert ctx.git_dir == tmp_path / "MyApp" / ".git"
