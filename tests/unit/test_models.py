"""Tests for BootstrapConfig and CommandResult."""

import pytest

from env_bootstrap.errors import ConfigurationError
from env_bootstrap.models import BootstrapConfig, CommandResult
from env_bootstrap.platforms import TargetPlatform


class TestCommandResult:
    def test_success_follows_returncode(self):
        assert CommandResult(command=["true"], returncode=0).success is True
        assert CommandResult(command=["false"], returncode=1).success is False

    def test_stderr_text_replaces_invalid_bytes(self):
        result = CommandResult(command=["x"], returncode=1, stderr=b"caf\xc3\xa9 \xff")

        assert result.stderr_text == "caf\u00e9 \ufffd"

    def test_output_defaults_empty(self):
        result = CommandResult(command=["x"], returncode=0)

        assert result.stdout == b""
        assert result.stderr_text == ""


class TestBootstrapConfig:
    def test_defaults(self, workspace):
        config = BootstrapConfig(workspace_root=workspace)

        assert config.venv_path == workspace / ".env"
        assert config.interpreter == "python3"
        assert config.installer_name == "pip3"
        assert config.tool_package == "maturin"
        assert config.repair_incomplete is False
        assert isinstance(config.target_platform, TargetPlatform)

    def test_platform_accepts_os_names(self, workspace):
        config = BootstrapConfig(workspace_root=str(workspace), target_platform="Darwin")

        assert config.target_platform is TargetPlatform.MACOS

    def test_blank_values_rejected(self, workspace):
        with pytest.raises(ValueError):
            BootstrapConfig(workspace_root=workspace, interpreter="")

    def test_relative_workspace_made_absolute(self, workspace, monkeypatch):
        monkeypatch.chdir(workspace.parent)

        config = BootstrapConfig(workspace_root=workspace.name)

        assert config.workspace_root.is_absolute()
        assert config.workspace_root == workspace
        assert config.venv_path == workspace / ".env"

    def test_missing_workspace_rejected(self, tmp_path):
        with pytest.raises(ValueError, match="not a directory"):
            BootstrapConfig(workspace_root=tmp_path / "nope")

    def test_file_as_workspace_rejected(self, tmp_path):
        path = tmp_path / "Cargo.toml"
        path.touch()

        with pytest.raises(ValueError, match="not a directory"):
            BootstrapConfig(workspace_root=path)

    def test_unknown_field_rejected(self, workspace):
        with pytest.raises(ValueError, match="interpeter"):
            BootstrapConfig(workspace_root=workspace, interpeter="python3.12")


class TestBootstrapConfigFromEnv:
    def test_reads_cargo_manifest_dir(self, workspace):
        config = BootstrapConfig.from_env({"CARGO_MANIFEST_DIR": str(workspace)})

        assert config.workspace_root == workspace

    def test_explicit_workspace_variable_wins_over_cargo(self, workspace, tmp_path):
        config = BootstrapConfig.from_env(
            {
                "ENV_BOOTSTRAP_WORKSPACE_ROOT": str(tmp_path),
                "CARGO_MANIFEST_DIR": str(workspace),
            }
        )

        assert config.workspace_root == tmp_path

    def test_missing_workspace_raises(self):
        with pytest.raises(ConfigurationError, match="CARGO_MANIFEST_DIR"):
            BootstrapConfig.from_env({})

    def test_nonexistent_workspace_raises(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not a directory"):
            BootstrapConfig.from_env({"CARGO_MANIFEST_DIR": str(tmp_path / "gone")})

    def test_reads_all_settings(self, workspace):
        config = BootstrapConfig.from_env(
            {
                "CARGO_MANIFEST_DIR": str(workspace),
                "ENV_BOOTSTRAP_VENV_DIR": ".venv",
                "ENV_BOOTSTRAP_PYTHON": "python3.11",
                "ENV_BOOTSTRAP_INSTALLER": "pip",
                "ENV_BOOTSTRAP_PACKAGE": "maturin>=1.4",
                "ENV_BOOTSTRAP_TARGET_OS": "windows",
                "ENV_BOOTSTRAP_REPAIR": "Yes",
            }
        )

        assert config.venv_path == workspace / ".venv"
        assert config.interpreter == "python3.11"
        assert config.installer_name == "pip"
        assert config.tool_package == "maturin>=1.4"
        assert config.target_platform is TargetPlatform.WINDOWS
        assert config.repair_incomplete is True

    @pytest.mark.parametrize("raw", ["0", "false", "off", "", "nope"])
    def test_repair_false_values(self, workspace, raw):
        config = BootstrapConfig.from_env(
            {"CARGO_MANIFEST_DIR": str(workspace), "ENV_BOOTSTRAP_REPAIR": raw}
        )

        assert config.repair_incomplete is False

    def test_overrides_win_and_none_is_ignored(self, workspace, tmp_path):
        config = BootstrapConfig.from_env(
            {"CARGO_MANIFEST_DIR": str(workspace), "ENV_BOOTSTRAP_PACKAGE": "maturin"},
            workspace_root=tmp_path,
            tool_package=None,
            interpreter="pypy3",
        )

        assert config.workspace_root == tmp_path
        assert config.tool_package == "maturin"
        assert config.interpreter == "pypy3"

    def test_invalid_value_raises_configuration_error(self, workspace):
        with pytest.raises(ConfigurationError, match="Invalid bootstrap configuration"):
            BootstrapConfig.from_env(
                {"CARGO_MANIFEST_DIR": str(workspace)}, tool_package=" "
            )
