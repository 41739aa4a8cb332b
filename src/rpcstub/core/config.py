"""
Project configuration models.

Parses rpcstub.toml and provides typed configuration for rendering and
output writing.
"""

from __future__ import annotations

import re
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from rpcstub.core.errors import ConfigError

CONFIG_FILE_NAME = "rpcstub.toml"

DEFAULT_HANDLER_CLASS = "com.weibo.api.motan.proxy.CommonHandler"
DEFAULT_REQUEST_CLASS = "com.weibo.api.motan.rpc.Request"

_QUALIFIED_NAME = re.compile(r"^[A-Za-z_$][\w$]*(\.[A-Za-z_$][\w$]*)+$")


class RenderOptions(BaseModel):
    """
    Options that change the generated source.

    The handler and request classes are the generic call mechanism the
    client forwards to; only their names appear in generated code.
    """

    model_config = ConfigDict(frozen=True)

    handler_class: str = DEFAULT_HANDLER_CLASS
    request_class: str = DEFAULT_REQUEST_CLASS
    generated_comment: bool = True
    templates_dir: str | None = None

    @field_validator("handler_class", "request_class")
    @classmethod
    def _check_qualified(cls, value: str) -> str:
        if not _QUALIFIED_NAME.match(value):
            raise ValueError(f"expected a qualified Java class name, got {value!r}")
        return value

    @property
    def handler_simple_name(self) -> str:
        return self.handler_class.rsplit(".", 1)[-1]

    @property
    def request_simple_name(self) -> str:
        return self.request_class.rsplit(".", 1)[-1]


class OutputConfig(BaseModel):
    """Output configuration."""

    directory: str = "generated/"
    with_package_dir: bool = False
    clean: bool = False


class StubgenConfig(BaseModel):
    """Complete project configuration."""

    render: RenderOptions = Field(default_factory=RenderOptions)
    output: OutputConfig = Field(default_factory=OutputConfig)

    def get_output_path(self, project_root: Path) -> Path:
        """Get absolute output directory path."""
        output_dir = Path(self.output.directory)
        if output_dir.is_absolute():
            return output_dir
        return project_root / output_dir

    def get_templates_path(self, project_root: Path) -> Path | None:
        """Get the project template directory, if one is configured."""
        if self.render.templates_dir is None:
            return None
        templates_dir = Path(self.render.templates_dir)
        if templates_dir.is_absolute():
            return templates_dir
        return project_root / templates_dir


def load_config(toml_path: Path) -> StubgenConfig:
    """
    Load project configuration from rpcstub.toml.

    Args:
        toml_path: Path to rpcstub.toml

    Returns:
        StubgenConfig with parsed values or defaults

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid values
    """
    if not toml_path.exists():
        return StubgenConfig()

    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {toml_path}: {e}") from e

    # [handler] and [render] both feed RenderOptions
    render_data: dict[str, Any] = {}
    render_data.update(data.get("handler", {}))
    render_data.update(data.get("render", {}))

    try:
        return StubgenConfig(
            render=RenderOptions(**render_data),
            output=OutputConfig(**data.get("output", {})),
        )
    except PydanticValidationError as e:
        raise ConfigError(f"Invalid configuration in {toml_path}: {e}") from e


def find_config(start: Path) -> Path:
    """Return the rpcstub.toml path for a project directory or descriptor file."""
    directory = start if start.is_dir() else start.parent
    return directory / CONFIG_FILE_NAME
