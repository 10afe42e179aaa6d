"""Pytest configuration and fixtures."""

import pytest

from prompt_theme.config.loader import load_config_from_string
from prompt_theme.config.schema import PromptConfig


@pytest.fixture
def sample_config() -> PromptConfig:
    """Sample configuration for testing."""
    yaml_content = """
path_color: "#00ff00"
git_branch_icon: "git:"
git_branch_color: magenta
git_status_disable: false
git_status_staged_icon: "S"
git_status_ahead_icon: "A"
char_user_icon: ">"
char_user_color: 208
char_root_failed_color: "#f00"
"""
    return load_config_from_string(yaml_content)


@pytest.fixture
def default_config() -> PromptConfig:
    """Configuration with every field at its default."""
    return PromptConfig()


@pytest.fixture
def config_dir(tmp_path):
    """Directory holding a main config file and an empty drop-in directory."""
    (tmp_path / "config.yaml").write_text('path_color: "#00ff00"\ngit_branch_icon: "git:"\n')
    (tmp_path / "conf.d").mkdir()
    return tmp_path
