"""
Error types for descriptor loading, stub rendering, and output writing.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class RpcStubError(Exception):
    """Base exception for all rpcstub errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class TemplateError(RpcStubError):
    """
    Raised when a service descriptor cannot be rendered.

    Examples:
    - Empty service name
    - Empty package
    - Template rendering failure
    """

    pass


class MethodSignatureError(RpcStubError):
    """
    Raised when a method in the descriptor has a malformed signature.

    Examples:
    - Two parameters with the same name
    """

    pass


class DescriptorError(RpcStubError):
    """
    Raised when a descriptor file cannot be loaded.

    Examples:
    - Unsupported file suffix
    - Invalid TOML or JSON
    - Fields that fail model validation
    """

    pass


class ConfigError(RpcStubError):
    """Raised when rpcstub.toml is malformed."""

    pass


class WriteError(RpcStubError):
    """Raised when a rendered client cannot be written to disk."""

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error.

    Attributes:
        file: Path to the descriptor file, if the service came from one
        service: Service name being processed
        method: Method name being processed
    """

    file: Path | None = None
    service: str | None = None
    method: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "services/foo.toml: service Foo, method bar"
        """
        parts = []
        if self.service:
            parts.append(f"service {self.service}")
        if self.method:
            parts.append(f"method {self.method}")

        location = ", ".join(parts)
        if self.file:
            return f"{self.file}: {location}" if location else str(self.file)
        return location


def make_descriptor_error(
    message: str,
    file: Path,
    service: str | None = None,
) -> DescriptorError:
    """
    Helper to create a DescriptorError with file context.

    Args:
        message: Error description
        file: Descriptor file path
        service: Optional service name inside the file

    Returns:
        DescriptorError with context attached
    """
    context = ErrorContext(file=file, service=service)
    return DescriptorError(message, context)


def make_signature_error(
    message: str,
    service: str,
    method: str,
) -> MethodSignatureError:
    """Helper to create a MethodSignatureError pointing at one method."""
    return MethodSignatureError(message, ErrorContext(service=service, method=method))
