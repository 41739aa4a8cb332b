"""
Data models for RPC client stubs.

A ServiceDescriptor describes one service interface: its Java package, the
extra imports its signatures need, and the ordered list of methods. The
renderer turns it into a client class that forwards every call to a generic
handler.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

VOID = "void"

_GENERIC_ARGS = re.compile(r"<.*>")


class ParamDescriptor(BaseModel):
    """
    A single method parameter.

    Attributes:
        type_name: Java type as written in the signature (e.g. 'int', 'List<String>')
        name: Parameter name, used verbatim in the argument array
    """

    type_name: str = Field(alias="type")
    name: str

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _parse_shorthand(cls, data: Any) -> Any:
        # "List<String> names" -> type + name
        if isinstance(data, str):
            parts = data.strip().rsplit(None, 1)
            if len(parts) != 2:
                raise ValueError(f"parameter must be '<type> <name>', got {data!r}")
            return {"type": parts[0], "name": parts[1]}
        return data

    def declaration(self) -> str:
        """Return the parameter as it appears in a Java signature."""
        return f"{self.type_name} {self.name}"


class MethodDescriptor(BaseModel):
    """
    A service method.

    Attributes:
        name: Method name, also sent as the remote method name
        return_type: Declared Java return type, 'void' for none
        params: Ordered parameters
    """

    name: str
    return_type: str = VOID
    params: list[ParamDescriptor] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def is_void(self) -> bool:
        return self.return_type.strip() == VOID

    def param_list(self) -> str:
        """Return the comma-separated parameter declarations."""
        return ", ".join(p.declaration() for p in self.params)

    def arg_names(self) -> str:
        """Return the comma-separated argument names for the request array."""
        return ", ".join(p.name for p in self.params)

    def return_class_literal(self) -> str:
        """
        Return the class literal for the expected result type.

        Generic arguments cannot appear in a class literal, so they are
        erased: 'List<String>' becomes 'List.class'. Array brackets are kept.
        """
        return f"{_GENERIC_ARGS.sub('', self.return_type).strip()}.class"

    def duplicate_param_names(self) -> list[str]:
        """Return parameter names that occur more than once, in first-seen order."""
        seen: set[str] = set()
        duplicates: list[str] = []
        for param in self.params:
            if param.name in seen and param.name not in duplicates:
                duplicates.append(param.name)
            seen.add(param.name)
        return duplicates


class ServiceDescriptor(BaseModel):
    """
    Specification for one service client.

    Attributes:
        package: Java package of the generated client
        imports: Extra imports, emitted verbatim and in order after the base imports
        service_name: Simple name of the service interface
        methods: Ordered methods; one override is generated per entry
    """

    package: str
    imports: list[str] = Field(default_factory=list)
    service_name: str
    methods: list[MethodDescriptor] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def client_class_name(self) -> str:
        """Return the generated client class name."""
        return f"{self.service_name}Client"

    def qualified_name(self) -> str:
        """Return the fully-qualified service interface name."""
        return f"{self.package}.{self.service_name}"

    def file_name(self) -> str:
        return f"{self.client_class_name()}.java"

    def import_lines(self) -> list[str]:
        """
        Return the extra imports as Java statements.

        Entries may be bare qualified names ('java.util.List') or complete
        statements ('import java.util.List;'). Duplicates are kept, blank
        entries are dropped.
        """
        lines = []
        for entry in self.imports:
            entry = entry.strip()
            if not entry:
                continue
            if entry.startswith("import "):
                lines.append(entry if entry.endswith(";") else f"{entry};")
            else:
                lines.append(f"import {entry};")
        return lines
