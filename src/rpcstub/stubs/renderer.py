"""
Stub Renderer for RPC service clients.

Renders a ServiceDescriptor into the source of a Java client class. The
client implements the service interface and forwards every method call to a
generic call handler:

- build a request from the service name, method name and argument array
- call the handler with the request and the expected result type
- cast and return the result (nothing is returned for void methods)
- rethrow RuntimeExceptions as-is and wrap every other Throwable

Rendering is pure: equal descriptors and options give byte-identical output.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, StrictUndefined
from jinja2 import TemplateError as JinjaTemplateError

from rpcstub.core.config import RenderOptions
from rpcstub.core.errors import ErrorContext, TemplateError, make_signature_error

if TYPE_CHECKING:
    from rpcstub.stubs.models import ServiceDescriptor

logger = logging.getLogger(__name__)

_JAVA_IDENTIFIER = re.compile(r"[A-Za-z_$][\w$]*")

# Template directory
TEMPLATES_DIR = Path(__file__).parent / "templates"

JAVA_CLIENT_TEMPLATE = "java_client.java.j2"


def create_jinja_env(project_templates_dir: Path | None = None) -> Environment:
    """Create and configure the Jinja2 environment.

    Args:
        project_templates_dir: Optional path to project-level templates.
            A ``java_client.java.j2`` found there replaces the bundled one.
    """
    loaders = [FileSystemLoader(str(TEMPLATES_DIR))]
    if project_templates_dir and project_templates_dir.is_dir():
        # Project templates searched first, bundled templates as fallback
        loaders.insert(0, FileSystemLoader(str(project_templates_dir)))

    return Environment(
        loader=ChoiceLoader(loaders),
        undefined=StrictUndefined,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


class StubRenderer:
    """
    Render client stubs from ServiceDescriptor.

    One renderer can be reused for any number of descriptors; it holds only
    the Jinja2 environment and the render options.
    """

    def __init__(
        self,
        options: RenderOptions | None = None,
        project_templates_dir: Path | None = None,
    ):
        self.options = options or RenderOptions()
        self.env = create_jinja_env(project_templates_dir)

    def render(self, descriptor: ServiceDescriptor) -> str:
        """
        Render the client class source for one service.

        Args:
            descriptor: The service to render

        Returns:
            Complete Java source text

        Raises:
            TemplateError: If service_name or package is empty, service_name
                is not an identifier, or the template fails to render
            MethodSignatureError: If a method has a blank name or return
                type, or repeats a parameter name
        """
        self.validate(descriptor)

        try:
            template = self.env.get_template(JAVA_CLIENT_TEMPLATE)
            source = template.render(service=descriptor, options=self.options)
        except JinjaTemplateError as e:
            raise TemplateError(
                f"Template rendering failed: {e}",
                ErrorContext(service=descriptor.service_name),
            ) from e

        logger.debug(
            "Rendered %s with %d method(s)",
            descriptor.client_class_name(),
            len(descriptor.methods),
        )
        return source

    def validate(self, descriptor: ServiceDescriptor) -> None:
        """Check the render preconditions without rendering."""
        if not descriptor.service_name.strip():
            raise TemplateError("service_name must not be empty")
        if not _JAVA_IDENTIFIER.fullmatch(descriptor.service_name):
            raise TemplateError(
                f"service_name is not a Java identifier: {descriptor.service_name!r}"
            )
        if not descriptor.package.strip():
            raise TemplateError(
                "package must not be empty",
                ErrorContext(service=descriptor.service_name),
            )

        for index, method in enumerate(descriptor.methods):
            if not method.name.strip():
                raise make_signature_error(
                    f"Method #{index + 1} has an empty name",
                    service=descriptor.service_name,
                    method=f"#{index + 1}",
                )
            if not _JAVA_IDENTIFIER.fullmatch(method.name):
                raise make_signature_error(
                    f"Method name is not a Java identifier: {method.name!r}",
                    service=descriptor.service_name,
                    method=method.name,
                )
            if not method.return_type.strip():
                raise make_signature_error(
                    "return_type must not be empty",
                    service=descriptor.service_name,
                    method=method.name,
                )
            duplicates = method.duplicate_param_names()
            if duplicates:
                raise make_signature_error(
                    f"Duplicate parameter name(s): {', '.join(duplicates)}",
                    service=descriptor.service_name,
                    method=method.name,
                )


def render(descriptor: ServiceDescriptor, options: RenderOptions | None = None) -> str:
    """
    Render a client stub with the bundled template.

    Args:
        descriptor: The service to render
        options: Render options; defaults to the Motan handler classes

    Returns:
        Complete Java source text
    """
    return StubRenderer(options).render(descriptor)
