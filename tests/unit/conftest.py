"""
Unit Test Fixtures.

Fixtures for unit tests. External dependencies (network, profile store,
ssh binary) are faked or written under tmp_path.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
import yaml


# =============================================================================
# Profile store fixtures
# =============================================================================


@pytest.fixture
def pit_dir(tmp_path: Path) -> Path:
    """Profile store directory matching MEZASI_PIT_DIR from the root conftest."""
    directory = tmp_path / "pit"
    directory.mkdir(exist_ok=True)
    return directory


@pytest.fixture
def write_profile(pit_dir: Path):
    """
    Write a profile file into the store.

    Usage:
        def test_endpoint(write_profile):
            write_profile("default", {"urume.config": {"endpoint": "http://host/"}})
    """
    def _write(profile: str, data: dict, select: bool = False) -> Path:
        path = pit_dir / f"{profile}.yaml"
        path.write_text(yaml.safe_dump(data))
        if select:
            (pit_dir / "pit.yaml").write_text(yaml.safe_dump({"profile": profile}))
        return path

    return _write


# =============================================================================
# File fixtures
# =============================================================================


@pytest.fixture
def public_key_file(tmp_path: Path) -> Path:
    """A local ssh public key file."""
    path = tmp_path / "id_ed25519.pub"
    path.write_text("ssh-ed25519 AAAAC3NzaC1lZDI1NTE5AAAAIExample user@host\n")
    return path


@pytest.fixture
def user_data_file(tmp_path: Path) -> Path:
    """A local boot script."""
    path = tmp_path / "boot.sh"
    path.write_text("#!/bin/sh\necho booted\n")
    return path


# =============================================================================
# Logging Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger() -> MagicMock:
    """
    Mock logger for testing logging calls.

    Usage:
        def test_logging(mock_logger):
            with patch("module.logger", mock_logger):
                # Test code that logs
                mock_logger.info.assert_called_once()
    """
    logger = MagicMock()
    logger.debug = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    return logger
