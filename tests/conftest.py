"""
Shared pytest fixtures for EOS CDMI tests.

This module provides common fixtures including:
- Sample QoS class and fileinfo descriptions
- A mock command runner with canned mgm.proc.* responses
- Configuration isolation
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from eos_cdmi.modules.config import reset_config


# =============================================================================
# Response helpers
# =============================================================================


def make_response(stdout: str = "", stderr: str = "", retc: int = 0) -> str:
    """Build a raw EOS command response."""
    return f"mgm.proc.stdout={stdout}&mgm.proc.stderr={stderr}&mgm.proc.retc={retc}"


def make_json_response(payload: Any) -> str:
    """Build a successful response whose output is JSON."""
    return make_response(stdout=json.dumps(payload))


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Make every test start from a fresh, environment-free configuration."""
    for name in list(os.environ):
        if name.startswith("EOS_CDMI_"):
            monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def disk_replica() -> Dict[str, Any]:
    """QoS class description for the replicated disk class."""
    return {
        "name": "disk_replica",
        "metadata": {
            "cdmi_data_redundancy_provided": 2,
            "cdmi_latency_provided": 1,
            "cdmi_geographic_placement_provided": ["CH", "FR"],
        },
        "transition": ["disk_plain"],
    }


@pytest.fixture
def disk_plain() -> Dict[str, Any]:
    """QoS class description for the plain disk class."""
    return {
        "name": "disk_plain",
        "metadata": {
            "cdmi_data_redundancy_provided": 1,
            "cdmi_latency_provided": 1,
            "cdmi_geographic_placement_provided": ["CH"],
        },
        "transition": ["disk_replica"],
    }


@pytest.fixture
def directory_fileinfo() -> Dict[str, Any]:
    """Fileinfo JSON for a directory holding two entries."""
    return {
        "name": "/eos/dev/qos/",
        "treesize": 4096,
        "children": [
            {"name": "file1.dat", "size": 1024},
            {"name": "subdir", "treesize": 0},
        ],
        "metadata": {
            "cdmi_data_redundancy_provided": 1,
            "cdmi_latency_provided": 1,
            "cdmi_geographic_placement_provided": ["CH"],
        },
    }


@pytest.fixture
def capability_set() -> Dict[str, Any]:
    """Fixed capability set passed through to every record."""
    return {"cdmi_data_redundancy": True, "cdmi_latency": True}


@pytest.fixture
def mock_runner():
    """Create a mock command runner; tests set run.return_value."""
    runner = MagicMock()
    runner.run = MagicMock(return_value=make_response())
    return runner
