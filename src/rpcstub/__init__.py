"""
rpcstub - client stub generator for RPC services.

Renders service descriptors into Java client classes that forward every
method call to a generic call handler.
"""

from __future__ import annotations

from ._version import __version__
from .core.errors import (
    DescriptorError,
    MethodSignatureError,
    RpcStubError,
    TemplateError,
)
from .stubs import ServiceDescriptor, StubRenderer, render

__all__ = [
    "__version__",
    "RpcStubError",
    "TemplateError",
    "MethodSignatureError",
    "DescriptorError",
    "ServiceDescriptor",
    "StubRenderer",
    "render",
]
