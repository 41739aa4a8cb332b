"""
Client stub generation for RPC services.

A ServiceDescriptor is rendered into a Java client class that implements the
service interface by forwarding each call to a generic call handler.
"""

from rpcstub.stubs.loader import load_descriptors
from rpcstub.stubs.models import MethodDescriptor, ParamDescriptor, ServiceDescriptor
from rpcstub.stubs.renderer import StubRenderer, render
from rpcstub.stubs.writer import GenerationResult, StubWriter

__all__ = [
    "StubRenderer",
    "StubWriter",
    "GenerationResult",
    "ServiceDescriptor",
    "MethodDescriptor",
    "ParamDescriptor",
    "load_descriptors",
    "render",
]
