"""Pydantic model for the prompt configuration."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_serializer,
    field_validator,
)

from prompt_theme.core.color import Color, NamedColor, deserialize_color, format_color
from prompt_theme.errors import ConfigError, InvalidBoolValue

COLOR_FIELDS = (
    "path_color",
    "git_branch_color",
    "git_status_color",
    "char_user_color",
    "char_user_failed_color",
    "char_root_color",
    "char_root_failed_color",
)

BOOL_FIELDS = ("git_branch_disable", "git_status_disable")

EXPECTED_BOOL = "either `0`, `false`, `1`, or `true`"


def deserialize_bool(value: str, field: str = "") -> bool:
    """Parse a boolean toggle. Case-sensitive.

    Args:
        value: "0" or "false" for False, "1" or "true" for True
        field: Field name used in error messages

    Raises:
        InvalidBoolValue: Any other string
    """
    match value:
        case "0" | "false":
            return False
        case "1" | "true":
            return True
        case _:
            raise InvalidBoolValue(value, EXPECTED_BOOL, field=field)


def format_bool(value: bool) -> str:
    """Format a toggle back into a string accepted by ``deserialize_bool``."""
    return "true" if value else "false"


class PromptConfig(BaseModel):
    """Icons, colors and toggles for each prompt segment.

    Every field has its own default. Instances are immutable.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    path_color: Color = Field(default=NamedColor.BLUE, description="Working directory color")

    git_branch_icon: str = Field(
        default="\ue0a0", description="Icon before the branch name (powerline glyph)"
    )
    git_branch_color: Color = Field(default=NamedColor.CYAN)
    git_branch_disable: bool = Field(default=False, description="Hide the git branch segment")

    git_status_staged_icon: str = "+"
    git_status_unstaged_icon: str = "!"
    git_status_untracked_icon: str = "?"
    git_status_ahead_icon: str = "↥"
    git_status_behind_icon: str = "↧"
    git_status_color: Color = Field(default=NamedColor.CYAN)
    git_status_disable: bool = Field(default=False, description="Hide the git status segment")

    char_user_icon: str = Field(default="$", description="Prompt character for regular users")
    char_user_color: Color = Field(default=NamedColor.GREEN)
    char_user_failed_icon: str = Field(
        default="$", description="Prompt character after a failed command"
    )
    char_user_failed_color: Color = Field(default=NamedColor.RED)
    char_root_icon: str = Field(default="#", description="Prompt character for root")
    char_root_color: Color = Field(default=NamedColor.GREEN)
    char_root_failed_icon: str = "#"
    char_root_failed_color: Color = Field(default=NamedColor.RED)

    @field_validator(*COLOR_FIELDS, mode="before")
    @classmethod
    def parse_color_fields(cls, v: Any, info: ValidationInfo) -> Any:
        """Parse raw color strings; already-parsed colors pass through."""
        if isinstance(v, str):
            return deserialize_color(v, field=info.field_name or "")
        return v

    @field_validator(*BOOL_FIELDS, mode="before")
    @classmethod
    def parse_bool_fields(cls, v: Any, info: ValidationInfo) -> Any:
        """Parse raw boolean strings; real booleans pass through."""
        if isinstance(v, str):
            return deserialize_bool(v, field=info.field_name or "")
        return v

    @field_serializer(*COLOR_FIELDS)
    def serialize_color(self, color: Color) -> str:
        return format_color(color)

    @field_serializer(*BOOL_FIELDS)
    def serialize_bool(self, value: bool) -> str:
        return format_bool(value)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, str]) -> PromptConfig:
        """Build a config from raw key/value strings (see ``parse_config``)."""
        return parse_config(raw)

    def to_mapping(self) -> dict[str, str]:
        """Serialize every field to the raw string form the parser accepts."""
        return self.model_dump()

    def char_icon(self, root: bool = False, failed: bool = False) -> str:
        """Prompt character for the user kind and last exit status."""
        if root:
            return self.char_root_failed_icon if failed else self.char_root_icon
        return self.char_user_failed_icon if failed else self.char_user_icon

    def char_color(self, root: bool = False, failed: bool = False) -> Color:
        """Prompt character color for the user kind and last exit status."""
        if root:
            return self.char_root_failed_color if failed else self.char_root_color
        return self.char_user_failed_color if failed else self.char_user_color


def _first_config_error(exc: ValidationError) -> ConfigError:
    """Recover the ConfigError pydantic wrapped, or describe its own error."""
    error = exc.errors()[0]
    cause = error.get("ctx", {}).get("error")
    if isinstance(cause, ConfigError):
        return cause

    field = ".".join(str(part) for part in error["loc"])
    return ConfigError(str(error.get("input")), error["msg"].lower(), field=field)


def parse_config(raw: Mapping[str, str]) -> PromptConfig:
    """Build a PromptConfig from raw key/value strings.

    Unknown keys are ignored and absent keys take their defaults. The first
    invalid field, in declaration order, aborts the whole parse.

    Args:
        raw: Mapping of field names to raw strings

    Returns:
        Parsed configuration

    Raises:
        ConfigError: A field value is invalid
    """
    try:
        return PromptConfig.model_validate(dict(raw))
    except ValidationError as exc:
        raise _first_config_error(exc) from exc
