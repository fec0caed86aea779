"""
Module: conftest.py

Date: 2026-10-19

Global pytest configuration and fixtures for the fsgateway test suite.
"""

import logging
import os
import platform
import sys

# Add project root to sys.path so 'fsgateway' imports without installation
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from fsgateway.services.filesystem_gateway import FilesystemGateway
from fsgateway.services.path_resolver import UnsupportedPathResolver
from fsgateway.services.registry import ServiceRegistry
from fsgateway.utils.logging.logger_helper import PACKAGE_LOGGER_NAME


def pytest_collection_modifyitems(session, config, items):
    """Skip platform-specific tests on other platforms."""
    _ = session
    _ = config

    system = platform.system()
    skip_windows = pytest.mark.skip(reason="Requires the Win32 handle APIs")
    skip_linux = pytest.mark.skip(reason="Requires /proc")

    for item in items:
        if "windows_only" in item.keywords and system != "Windows":
            item.add_marker(skip_windows)
        if "linux_only" in item.keywords and (system != "Linux" or not os.path.isdir("/proc/self/fd")):
            item.add_marker(skip_linux)


@pytest.fixture(autouse=True)
def reset_shared_state():
    """Drop process-wide singletons and logger levels between tests."""
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    root_logger = logging.getLogger()
    package_level = package_logger.level
    root_level = root_logger.level

    FilesystemGateway.reset_instance()
    ServiceRegistry.reset_instance()
    yield
    FilesystemGateway.reset_instance()
    ServiceRegistry.reset_instance()

    package_logger.setLevel(package_level)
    root_logger.setLevel(root_level)


@pytest.fixture
def gateway():
    """Gateway using the resolver for the running platform."""
    return FilesystemGateway()


@pytest.fixture
def generic_gateway():
    """Gateway that always takes the generic canonicalization path."""
    return FilesystemGateway(path_resolver=UnsupportedPathResolver())


@pytest.fixture
def populated_dir(tmp_path):
    """Directory with two files and two subdirectories."""
    (tmp_path / "b.txt").write_text("b")
    (tmp_path / "a.log").write_text("a")
    (tmp_path / "sub2").mkdir()
    (tmp_path / "sub1").mkdir()
    return tmp_path
