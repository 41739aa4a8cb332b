"""
Descriptor file loading.

Descriptor files are TOML or JSON. A file holds either a single service
(top-level ``service_name``) or several under a ``services`` array:

    package = "com.example.user"
    imports = ["com.example.user.model.User"]

    [[services]]
    service_name = "UserService"

    [[services.methods]]
    name = "getUser"
    return_type = "User"
    params = ["long id"]

File-level ``package`` and ``imports`` are inherited by services that do
not set their own.
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from rpcstub.core.config import CONFIG_FILE_NAME
from rpcstub.core.errors import make_descriptor_error
from rpcstub.stubs.models import ServiceDescriptor

logger = logging.getLogger(__name__)

DESCRIPTOR_SUFFIXES = (".toml", ".json")

_INHERITED_KEYS = ("package", "imports")


def discover_descriptor_files(directory: Path) -> list[Path]:
    """Return descriptor files directly inside ``directory``, sorted by name."""
    return sorted(
        path
        for path in directory.iterdir()
        if path.is_file() and path.suffix in DESCRIPTOR_SUFFIXES and path.name != CONFIG_FILE_NAME
    )


def load_descriptors(path: Path) -> list[ServiceDescriptor]:
    """
    Load every service described by a file or a directory of files.

    Args:
        path: Descriptor file, or directory scanned non-recursively

    Returns:
        Services in file order (files sorted by name)

    Raises:
        DescriptorError: If a file cannot be read or validated
    """
    if path.is_dir():
        descriptors: list[ServiceDescriptor] = []
        for file in discover_descriptor_files(path):
            descriptors.extend(load_descriptor_file(file))
        return descriptors
    return load_descriptor_file(path)


def load_descriptor_file(path: Path) -> list[ServiceDescriptor]:
    """Load the services described by one TOML or JSON file."""
    data = _read_data(path)

    if "services" in data:
        entries = data["services"]
        if not isinstance(entries, list):
            raise make_descriptor_error("'services' must be an array of tables", path)
    elif "service_name" in data:
        entries = [data]
    else:
        raise make_descriptor_error("expected 'service_name' or a 'services' array", path)

    defaults = {key: data[key] for key in _INHERITED_KEYS if key in data}
    descriptors = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise make_descriptor_error("each service must be a table", path)
        merged = {**defaults, **entry}
        try:
            descriptors.append(ServiceDescriptor.model_validate(merged))
        except PydanticValidationError as e:
            raise make_descriptor_error(
                f"Invalid service descriptor: {e}", path, service=entry.get("service_name")
            ) from e

    logger.debug("Loaded %d service(s) from %s", len(descriptors), path)
    return descriptors


def _read_data(path: Path) -> dict[str, Any]:
    if path.suffix not in DESCRIPTOR_SUFFIXES:
        raise make_descriptor_error(
            f"Unsupported descriptor file type '{path.suffix}' "
            f"(expected one of {', '.join(DESCRIPTOR_SUFFIXES)})",
            path,
        )

    try:
        if path.suffix == ".toml":
            with open(path, "rb") as f:
                data = tomllib.load(f)
        else:
            data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise make_descriptor_error(f"Cannot read descriptor: {e}", path) from e
    except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
        raise make_descriptor_error(f"Malformed descriptor: {e}", path) from e

    if not isinstance(data, dict):
        raise make_descriptor_error("descriptor root must be an object", path)
    return data
