"""Tests for descriptor file loading."""

from pathlib import Path

import pytest

from rpcstub.core.errors import DescriptorError
from rpcstub.stubs.loader import discover_descriptor_files, load_descriptor_file, load_descriptors


class TestLoadDescriptorFile:
    def test_single_service_json(self, descriptor_dir: Path) -> None:
        services = load_descriptor_file(descriptor_dir / "foo.json")

        assert len(services) == 1
        foo = services[0]
        assert foo.service_name == "Foo"
        assert foo.package == "com.x"
        assert foo.methods[0].params[0].type_name == "int"

    def test_services_array_inherits_file_defaults(self, descriptor_dir: Path) -> None:
        user, audit = load_descriptor_file(descriptor_dir / "user.toml")

        assert user.package == "com.example.user"
        assert user.imports == ["com.example.user.model.User"]
        assert user.methods[0].params[0].name == "id"
        # Own values win over file-level ones
        assert audit.package == "com.example.audit"
        assert audit.imports == []
        assert audit.methods[0].is_void

    def test_unsupported_suffix(self, tmp_path: Path) -> None:
        path = tmp_path / "foo.yaml"
        path.write_text("service_name: Foo\n")

        with pytest.raises(DescriptorError, match="Unsupported descriptor file type"):
            load_descriptor_file(path)

    def test_malformed_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.toml"
        path.write_text("service_name = \n")

        with pytest.raises(DescriptorError, match="Malformed descriptor") as exc_info:
            load_descriptor_file(path)
        assert str(path) in str(exc_info.value)

    def test_missing_service_keys(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.json"
        path.write_text("{}")

        with pytest.raises(DescriptorError, match="service_name"):
            load_descriptor_file(path)

    def test_invalid_service_names_service(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text('{"service_name": "Foo", "methods": [{"return_type": "int"}]}')

        with pytest.raises(DescriptorError, match="Invalid service descriptor") as exc_info:
            load_descriptor_file(path)
        assert exc_info.value.context is not None
        assert exc_info.value.context.service == "Foo"

    def test_json_root_must_be_object(self, tmp_path: Path) -> None:
        path = tmp_path / "list.json"
        path.write_text("[]")

        with pytest.raises(DescriptorError, match="root must be an object"):
            load_descriptor_file(path)

    def test_empty_service_name_loads(self, tmp_path: Path) -> None:
        """Render preconditions are the renderer's job, not the loader's."""
        path = tmp_path / "blank.json"
        path.write_text('{"package": "com.x", "service_name": ""}')

        assert load_descriptor_file(path)[0].service_name == ""


class TestLoadDescriptors:
    def test_directory_is_sorted_by_file_name(self, descriptor_dir: Path) -> None:
        services = load_descriptors(descriptor_dir)

        assert [s.service_name for s in services] == ["Foo", "UserService", "AuditService"]

    def test_directory_skips_config_and_other_files(self, descriptor_dir: Path) -> None:
        (descriptor_dir / "rpcstub.toml").write_text("[output]\ndirectory = 'out'\n")
        (descriptor_dir / "notes.txt").write_text("not a descriptor")
        (descriptor_dir / "nested").mkdir()

        files = discover_descriptor_files(descriptor_dir)

        assert [f.name for f in files] == ["foo.json", "user.toml"]

    def test_single_file(self, descriptor_dir: Path) -> None:
        assert len(load_descriptors(descriptor_dir / "user.toml")) == 2
