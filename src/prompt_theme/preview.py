"""Sample prompt rendering using prompt_toolkit formatted text."""

from __future__ import annotations

from dataclasses import dataclass, fields

from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.styles import Style

from prompt_theme.config.schema import PromptConfig
from prompt_theme.core.color import to_prompt_toolkit_style

# Style class -> config field holding its color
SEGMENT_COLORS: dict[str, str] = {
    "path": "path_color",
    "git-branch": "git_branch_color",
    "git-status": "git_status_color",
    "char-user": "char_user_color",
    "char-user-failed": "char_user_failed_color",
    "char-root": "char_root_color",
    "char-root-failed": "char_root_failed_color",
}


@dataclass
class GitStatus:
    """Which git status indicators are active."""

    staged: bool = False
    unstaged: bool = False
    untracked: bool = False
    ahead: bool = False
    behind: bool = False

    @classmethod
    def from_names(cls, names: list[str] | None) -> GitStatus:
        """Build from indicator names, e.g. ["staged", "ahead"]."""
        return cls(**{name: True for name in names or []})

    def icons(self, config: PromptConfig) -> str:
        """Concatenate the configured icons of the active indicators."""
        return "".join(
            getattr(config, f"git_status_{f.name}_icon")
            for f in fields(self)
            if getattr(self, f.name)
        )


def char_class(root: bool, failed: bool) -> str:
    """Style class of the prompt character segment."""
    name = "char-root" if root else "char-user"
    return f"{name}-failed" if failed else name


def build_style(config: PromptConfig) -> Style:
    """Build a prompt_toolkit style with one class per colored segment."""
    return Style.from_dict(
        {
            class_name: to_prompt_toolkit_style(getattr(config, field_name))
            for class_name, field_name in SEGMENT_COLORS.items()
        }
    )


def build_preview(
    config: PromptConfig,
    path: str = "~/projects/prompt-theme",
    branch: str | None = "main",
    status: GitStatus | None = None,
    root: bool = False,
    failed: bool = False,
) -> FormattedText:
    """Render a sample prompt as formatted text.

    Args:
        config: Prompt configuration
        path: Working directory text
        branch: Branch name, or None outside a repository
        status: Active git status indicators
        root: Render the root prompt character
        failed: Render the prompt character for a failed last command

    Returns:
        Formatted text fragments styled with classes from ``build_style``
    """
    fragments: list[tuple[str, str]] = [("class:path", path)]

    if branch is not None and not config.git_branch_disable:
        label = f"{config.git_branch_icon} {branch}" if config.git_branch_icon else branch
        fragments.append(("", " "))
        fragments.append(("class:git-branch", label))

    icons = (status or GitStatus()).icons(config)
    if branch is not None and icons and not config.git_status_disable:
        fragments.append(("", " "))
        fragments.append(("class:git-status", icons))

    fragments.append(("", "\n"))
    fragments.append((f"class:{char_class(root, failed)}", config.char_icon(root, failed)))
    fragments.append(("", " "))

    return FormattedText(fragments)
