"""Tests for the command-line interface."""

import pytest
import yaml

from prompt_theme.cli import main, parse_args
from prompt_theme.config.loader import load_config_from_string
from prompt_theme.config.schema import PromptConfig


def _run(config_dir, *args: str) -> int:
    return main(
        [
            "--config",
            str(config_dir / "config.yaml"),
            "--config-dir",
            str(config_dir / "conf.d"),
            "--no-env",
            *args,
        ]
    )


class TestParseArgs:
    """Tests for parse_args function."""

    def test_preview_options(self):
        """Test parsing preview options."""
        parsed = parse_args(
            ["preview", "--root", "--failed", "--status", "staged", "--status", "ahead"]
        )

        assert parsed.command == "preview"
        assert parsed.root is True
        assert parsed.failed is True
        assert parsed.status == ["staged", "ahead"]
        assert parsed.no_branch is False

    def test_no_branch_option(self):
        """Test parsing the option for rendering outside a repository."""
        assert parse_args(["preview", "--no-branch"]).no_branch is True

    def test_command_required(self):
        """Test that a command must be given."""
        with pytest.raises(SystemExit):
            parse_args([])

    def test_unknown_status(self):
        """Test that status names are checked."""
        with pytest.raises(SystemExit):
            parse_args(["preview", "--status", "dirty"])


class TestMain:
    """Tests for main function."""

    def test_check_ok(self, config_dir, capsys):
        """Test checking a valid configuration."""
        assert _run(config_dir, "check") == 0
        assert capsys.readouterr().out == "ok\n"

    def test_check_invalid(self, config_dir, capsys):
        """Test checking an invalid configuration."""
        (config_dir / "conf.d" / "bad.yaml").write_text("git_status_disable: 'True'\n")

        assert _run(config_dir, "check") == 1

        err = capsys.readouterr().err
        assert err.startswith("Error: git_status_disable: invalid value 'True'")

    def test_check_invalid_env(self, config_dir, monkeypatch, capsys):
        """Test that environment overrides are validated."""
        monkeypatch.setenv("PROMPT_THEME_PATH_COLOR", "256")

        exit_code = main(
            [
                "--config",
                str(config_dir / "config.yaml"),
                "--config-dir",
                str(config_dir / "conf.d"),
                "check",
            ]
        )

        assert exit_code == 1
        assert "path_color" in capsys.readouterr().err

    def test_dump_round_trip(self, config_dir, capsys):
        """Test that dumped YAML loads back to the same configuration."""
        assert _run(config_dir, "dump") == 0

        out = capsys.readouterr().out
        data = yaml.safe_load(out)
        assert data["path_color"] == "#00ff00"
        assert data["git_branch_disable"] == "false"
        assert load_config_from_string(out) == load_config_from_string(
            'path_color: "#00ff00"\ngit_branch_icon: "git:"\n'
        )

    def test_dump_defaults(self, tmp_path, capsys):
        """Test dumping with no configuration files."""
        assert _run(tmp_path, "dump") == 0

        assert load_config_from_string(capsys.readouterr().out) == PromptConfig()

    def test_check_unquoted_boolean_word(self, config_dir, capsys):
        """Test that an unquoted YAML `True` is still an invalid toggle."""
        (config_dir / "conf.d" / "bad.yaml").write_text("git_branch_disable: True\n")

        assert _run(config_dir, "check") == 1
        assert "git_branch_disable: invalid value 'True'" in capsys.readouterr().err

    def test_check_unreadable_config(self, tmp_path, capsys):
        """Test that a config path that cannot be read is reported, not raised."""
        exit_code = main(
            [
                "--config",
                str(tmp_path),
                "--config-dir",
                str(tmp_path / "conf.d"),
                "--no-env",
                "check",
            ]
        )

        assert exit_code == 1
        err = capsys.readouterr().err
        assert err.startswith(f"Error: {tmp_path}: cannot read")

    def test_preview_no_branch(self, config_dir, monkeypatch):
        """Test previewing a prompt outside a git repository."""
        printed = []
        monkeypatch.setattr(
            "prompt_theme.cli.print_formatted_text",
            lambda text, style: printed.append(text),
        )

        exit_code = _run(
            config_dir, "preview", "--path", "/tmp", "--no-branch", "--status", "staged"
        )

        assert exit_code == 0
        assert "".join(text for _, text in printed[0]) == "/tmp\n$ "

    def test_preview_with_branch(self, config_dir, monkeypatch):
        """Test that the branch segment is shown by default."""
        printed = []
        monkeypatch.setattr(
            "prompt_theme.cli.print_formatted_text",
            lambda text, style: printed.append(text),
        )

        assert _run(config_dir, "preview", "--path", "~", "--branch", "dev") == 0

        assert "".join(text for _, text in printed[0]) == "~ git: dev\n$ "
