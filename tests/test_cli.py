from unittest.mock import patch

import pytest

from uni.cli import UniCLI
from uni.cli_main import main
from uni.config import UniConfig
from uni.marker import MARKER_FILE


@pytest.fixture(autouse=True)
def default_config():
    with patch("uni.cli_main.load_config", return_value=UniConfig()) as mock:
        yield mock


class TestParser:
    def test_manager_flags_pass_through(self):
        args = UniCLI.parse_args(["--pkg=npm", "install", "-D", "vitest"])
        assert args.pkg == "npm"
        assert args.command == "install"
        assert args.args == ["-D", "vitest"]

    def test_pkg_from_environment(self, monkeypatch):
        monkeypatch.setenv("UNI_PKG", "bun")
        args = UniCLI.parse_args(["run", "dev"])
        assert args.pkg == "bun"

    def test_double_dash_after_command_is_kept(self):
        args = UniCLI.parse_args(["--pkg", "npm", "test", "--", "--watch"])
        assert args.pkg == "npm"
        assert args.command == "test"
        assert args.args == ["--", "--watch"]

    def test_global_flags_after_command_belong_to_it(self):
        args = UniCLI.parse_args(["run", "build", "--dry-run", "-v"])
        assert args.dry_run is False
        assert args.args == ["build", "--dry-run", "-v"]

    def test_double_dash_ends_global_options(self):
        args = UniCLI.parse_args(["--dry-run", "--", "--help"])
        assert args.dry_run is True
        assert args.command == "--help"
        assert args.args == []

    def test_no_command(self):
        args = UniCLI.parse_args(["--verbose"])
        assert args.verbose is True
        assert args.command is None


class TestMain:
    def test_no_command_shows_help(self, mock_run):
        assert main([]) == 0
        mock_run.assert_not_called()

    def test_install_from_lock_file(self, project_dir, all_found, mock_run):
        (project_dir / "pnpm-lock.yaml").write_text("")
        assert main(["install", "foo"]) == 0
        mock_run.assert_called_once_with(["pnpm", "add", "foo"])

    def test_pass_through(self, project_dir, all_found, mock_run):
        (project_dir / "package-lock.json").write_text("{}")
        main(["run", "dev", "--port", "3000"])
        mock_run.assert_called_once_with(["npm", "run", "dev", "--port", "3000"])

    def test_child_failure_exit_code(self, project_dir, all_found, mock_run):
        mock_run.return_value.returncode = 2
        assert main(["--pkg=npm", "test"]) == 2

    def test_unknown_override(self, project_dir, all_found, mock_run):
        (project_dir / "yarn.lock").write_text("")
        assert main(["--pkg=cargo", "install", "serde"]) == 1
        mock_run.assert_not_called()

    def test_missing_executable(self, project_dir, mock_which, mock_run):
        assert main(["--pkg=uv", "add", "httpx"]) == 1
        mock_run.assert_not_called()

    def test_unsupported_uninstall(self, project_dir, all_found, mock_run):
        assert main(["--pkg=pod", "uninstall", "Alamofire"]) == 1
        mock_run.assert_not_called()

    def test_dry_run(self, project_dir, all_found, mock_run):
        assert main(["--dry-run", "--pkg=yarn", "add", "react"]) == 0
        mock_run.assert_not_called()

    def test_exec(self, project_dir, all_found, mock_run):
        assert main(["--pkg=yarn", "x", "cowsay", "hi"]) == 0
        mock_run.assert_called_once_with(["yarn", "dlx cowsay hi"])

    def test_exec_usage(self, project_dir, mock_run):
        assert main(["exec"]) == 1

    def test_search_usage(self, project_dir, mock_run):
        assert main(["search"]) == 1

    def test_search_falls_back_to_native(self, project_dir, all_found, mock_run):
        assert main(["--pkg=pipx", "s", "black"]) == 0
        mock_run.assert_called_once_with(["pipx", "search", "black"])

    def test_init_writes_marker(self, project_dir, all_found, mock_run):
        assert main(["init", "npm"]) == 0
        assert (project_dir / MARKER_FILE).read_text() == "npm"
        mock_run.assert_called_once_with(["npm", "init", "-y"])

    def test_init_without_init_args(self, project_dir, mock_run):
        assert main(["init", "pip"]) == 0
        assert (project_dir / MARKER_FILE).read_text() == "pip"
        mock_run.assert_not_called()

    def test_init_unknown_manager(self, project_dir, mock_run):
        assert main(["init", "cargo"]) == 1
        assert not (project_dir / MARKER_FILE).exists()

    def test_init_usage(self, project_dir):
        assert main(["init"]) == 1
        assert main(["init", "npm", "yarn"]) == 1

    def test_marker_used_after_init(self, project_dir, all_found, mock_run):
        (project_dir / "package-lock.json").write_text("{}")
        main(["init", "pip"])
        main(["i", "requests"])
        mock_run.assert_called_with(["pip", "install", "requests"])

    def test_which(self, project_dir, mock_which):
        (project_dir / "bun.lock").write_text("")
        assert main(["which"]) == 0

    def test_managers(self, mock_which):
        assert main(["managers"]) == 0

    def test_invalid_config(self, project_dir, default_config):
        from uni.exceptions import ConfigError

        default_config.side_effect = ConfigError("bad")
        assert main(["install"]) == 1

    def test_double_dash_passes_through(self, project_dir, all_found, mock_run):
        (project_dir / "package-lock.json").write_text("{}")
        assert main(["test", "--", "--watch"]) == 0
        mock_run.assert_called_once_with(["npm", "test", "--", "--watch"])

    def test_dry_run_init_writes_nothing(self, project_dir, all_found, mock_run):
        assert main(["--dry-run", "init", "npm"]) == 0
        assert not (project_dir / MARKER_FILE).exists()
        mock_run.assert_not_called()

    def test_dry_run_without_executable(self, project_dir, mock_which, mock_run):
        assert main(["--dry-run", "--pkg=pnpm", "add", "react"]) == 0
        mock_run.assert_not_called()
