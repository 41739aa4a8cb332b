"""
Writing rendered clients to disk.

Each service becomes ``<ServiceName>Client.java``, either directly in the
output directory or under its package path when ``with_package_dir`` is set
(``com/example/FooClient.java``).
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from rpcstub.core.errors import ErrorContext, RpcStubError, WriteError

if TYPE_CHECKING:
    from rpcstub.stubs.models import ServiceDescriptor
    from rpcstub.stubs.renderer import StubRenderer

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """
    Result of a generation run.

    Attributes:
        files_created: Files written, in descriptor order
        errors: One message per descriptor that failed to render or write
        services: Qualified service name for each created file
    """

    files_created: list[Path] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    services: dict[Path, str] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        """Whether generation succeeded (no errors)."""
        return len(self.errors) == 0

    def add_file(self, path: Path, service: str | None = None) -> None:
        self.files_created.append(path)
        if service is not None:
            self.services[path] = service

    def add_error(self, error: str) -> None:
        self.errors.append(error)


class StubWriter:
    """Write rendered client sources below an output directory."""

    def __init__(self, output_dir: Path, with_package_dir: bool = False):
        self.output_dir = output_dir
        self.with_package_dir = with_package_dir

    def target_path(self, descriptor: ServiceDescriptor) -> Path:
        """Return the file a descriptor's client is written to."""
        if self.with_package_dir:
            return self.output_dir.joinpath(*descriptor.package.split("."), descriptor.file_name())
        return self.output_dir / descriptor.file_name()

    def write(self, descriptor: ServiceDescriptor, source: str) -> Path:
        """
        Write one rendered client.

        Returns:
            Path of the written file

        Raises:
            WriteError: If the directory or file cannot be created
        """
        path = self.target_path(descriptor)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(source, encoding="utf-8")
        except OSError as e:
            raise WriteError(
                f"Cannot write {path}: {e}", ErrorContext(service=descriptor.service_name)
            ) from e

        logger.info("Wrote %s", path)
        return path

    def clean(self) -> None:
        """
        Remove the output directory and everything in it.

        Raises:
            WriteError: If the output path is not a directory or cannot be removed
        """
        if not self.output_dir.exists():
            return
        logger.info("Removing %s", self.output_dir)
        try:
            shutil.rmtree(self.output_dir)
        except OSError as e:
            raise WriteError(f"Cannot clean {self.output_dir}: {e}") from e

    def generate_all(
        self,
        descriptors: Iterable[ServiceDescriptor],
        renderer: StubRenderer,
    ) -> GenerationResult:
        """
        Render and write every descriptor.

        A descriptor that fails is recorded in the result and generation
        moves on to the next one. Two services that map to the same file are
        an error for the later one, which is not written.
        """
        result = GenerationResult()
        claimed: dict[Path, str] = {}
        for descriptor in descriptors:
            try:
                source = renderer.render(descriptor)
                path = self.target_path(descriptor)
                if path in claimed:
                    raise WriteError(
                        f"Output file already generated for {claimed[path]}: {path}",
                        ErrorContext(service=descriptor.qualified_name()),
                    )
                claimed[path] = descriptor.qualified_name()
                result.add_file(self.write(descriptor, source), descriptor.qualified_name())
            except RpcStubError as e:
                logger.warning("Skipping %s: %s", descriptor.service_name or "<unnamed>", e)
                result.add_error(str(e))
        return result
