"""Tests for error formatting."""

from pathlib import Path

from rpcstub.core.errors import (
    DescriptorError,
    ErrorContext,
    MethodSignatureError,
    RpcStubError,
    TemplateError,
    make_descriptor_error,
    make_signature_error,
)


def test_error_without_context() -> None:
    error = TemplateError("service_name must not be empty")

    assert isinstance(error, RpcStubError)
    assert str(error) == "service_name must not be empty"


def test_descriptor_error_names_file_and_service() -> None:
    error = make_descriptor_error("bad field", Path("services/user.toml"), service="UserService")

    assert isinstance(error, DescriptorError)
    assert str(error) == "services/user.toml: service UserService\nbad field"


def test_signature_error_names_method() -> None:
    error = make_signature_error("Duplicate parameter name(s): id", service="Foo", method="bar")

    assert isinstance(error, MethodSignatureError)
    assert str(error).splitlines() == ["service Foo, method bar", "Duplicate parameter name(s): id"]


def test_context_with_file_only() -> None:
    assert ErrorContext(file=Path("foo.json")).format() == "foo.json"
