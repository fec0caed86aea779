"""Tests for service protocol interfaces.

Date: 2026-10-19

Tests verify that protocol definitions are correct and that
isinstance() works with runtime_checkable protocols.
"""

from __future__ import annotations

from pathlib import Path

from fsgateway.services import filesystem_gateway
from fsgateway.services.filesystem_gateway import FilesystemGateway
from fsgateway.services.interfaces import FilesystemGatewayProtocol, PathResolverProtocol
from tests.mocks import RaisingPathResolver, StaticPathResolver


class InMemoryGateway:
    """Gateway double backed by a dict."""

    def __init__(self) -> None:
        self.files: dict[str, str] = {}

    def read(self, path) -> str:
        return self.files.get(str(path), "")

    def write(self, path, content: str) -> bool:
        self.files[str(path)] = content + "\n"
        return True

    def change_directory(self, path) -> bool:
        return False

    def directory_exists(self, path) -> bool:
        return False

    def create_directory(self, path) -> bool:
        return True

    def rename(self, source, target) -> bool:
        self.files[str(target)] = self.files.pop(str(source))
        return True

    def remove(self, path) -> bool:
        self.files.pop(str(path), None)
        return True

    def file_exists(self, path) -> bool:
        return str(path) in self.files

    def absolute(self, path) -> Path:
        return Path(path)

    def canonical_unc_path(self, path) -> Path:
        return Path(path)

    def get_directories(self, path) -> list[Path]:
        return []

    def get_files(self, path) -> list[Path]:
        return [Path(p) for p in sorted(self.files)]


class TestFilesystemGatewayProtocol:
    """Tests for FilesystemGatewayProtocol."""

    def test_gateway_is_instance(self) -> None:
        """Test that FilesystemGateway implements the protocol."""
        assert isinstance(FilesystemGateway(), FilesystemGatewayProtocol)

    def test_compliance_helper_runs(self) -> None:
        """Test the module-level compliance check."""
        filesystem_gateway._verify_protocol_compliance()

    def test_double_is_instance(self) -> None:
        """Test that a structural double is recognized."""
        double = InMemoryGateway()

        assert isinstance(double, FilesystemGatewayProtocol)
        assert double.write("status", "up") is True
        assert double.read("status") == "up\n"

    def test_incomplete_implementation_not_instance(self) -> None:
        """Test that incomplete implementation is not recognized."""

        class ReadOnlyGateway:
            def read(self, path) -> str:
                _ = path
                return ""

        assert not isinstance(ReadOnlyGateway(), FilesystemGatewayProtocol)


class TestPathResolverProtocol:
    """Tests for PathResolverProtocol."""

    def test_mocks_are_instances(self) -> None:
        """Test that the test doubles satisfy the protocol."""
        assert isinstance(StaticPathResolver("/x"), PathResolverProtocol)
        assert isinstance(RaisingPathResolver(), PathResolverProtocol)

    def test_gateway_exposes_injected_resolver(self) -> None:
        """Test that the injected resolver is the one used."""
        resolver = StaticPathResolver("/x")

        assert FilesystemGateway(path_resolver=resolver).path_resolver is resolver
