"""Core rpcstub functionality: errors and project configuration."""

from .config import OutputConfig, RenderOptions, StubgenConfig, load_config
from .errors import (
    ConfigError,
    DescriptorError,
    ErrorContext,
    MethodSignatureError,
    RpcStubError,
    TemplateError,
    WriteError,
)

__all__ = [
    "RpcStubError",
    "TemplateError",
    "MethodSignatureError",
    "DescriptorError",
    "ConfigError",
    "WriteError",
    "ErrorContext",
    "RenderOptions",
    "OutputConfig",
    "StubgenConfig",
    "load_config",
]
