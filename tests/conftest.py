"""Shared pytest fixtures for rpcstub tests."""

from pathlib import Path

import pytest

from rpcstub.stubs.models import MethodDescriptor, ParamDescriptor, ServiceDescriptor


@pytest.fixture
def foo_service() -> ServiceDescriptor:
    """Return the minimal one-method service."""
    return ServiceDescriptor(
        package="com.x",
        service_name="Foo",
        methods=[
            MethodDescriptor(
                name="bar",
                return_type="String",
                params=[ParamDescriptor(type_name="int", name="id")],
            ),
        ],
    )


@pytest.fixture
def user_service() -> ServiceDescriptor:
    """Return a service with imports, generics, void and zero-arg methods."""
    return ServiceDescriptor(
        package="com.example.user",
        imports=["com.example.user.model.User", "import java.util.List;"],
        service_name="UserService",
        methods=[
            MethodDescriptor(
                name="getUser",
                return_type="User",
                params=[ParamDescriptor(type_name="long", name="id")],
            ),
            MethodDescriptor(
                name="findUsers",
                return_type="List<User>",
                params=[
                    ParamDescriptor(type_name="String", name="query"),
                    ParamDescriptor(type_name="int", name="limit"),
                ],
            ),
            MethodDescriptor(
                name="deleteUser",
                return_type="void",
                params=[ParamDescriptor(type_name="long", name="id")],
            ),
            MethodDescriptor(name="count", return_type="int"),
        ],
    )


@pytest.fixture
def descriptor_dir(tmp_path: Path) -> Path:
    """Create a directory with one TOML and one JSON descriptor."""
    (tmp_path / "user.toml").write_text(
        """
package = "com.example.user"
imports = ["com.example.user.model.User"]

[[services]]
service_name = "UserService"

[[services.methods]]
name = "getUser"
return_type = "User"
params = ["long id"]

[[services]]
service_name = "AuditService"
package = "com.example.audit"
imports = []

[[services.methods]]
name = "record"
params = [{ type = "String", name = "event" }]
"""
    )
    (tmp_path / "foo.json").write_text(
        """
{
  "package": "com.x",
  "service_name": "Foo",
  "methods": [
    {"name": "bar", "return_type": "String", "params": [{"type": "int", "name": "id"}]}
  ]
}
"""
    )
    return tmp_path
