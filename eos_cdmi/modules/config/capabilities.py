from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, conint, field_validator

from . import get_config

logger = logging.getLogger("eos_cdmi.config")


class CapabilitySetSpec(BaseModel):
    version: conint(ge=1) = 1
    capabilities: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("capabilities")
    @classmethod
    def capabilities_must_be_cdmi(cls, v: Dict[str, Any]) -> Dict[str, Any]:
        for key in v:
            if not key.startswith("cdmi_"):
                raise ValueError(f"Capability names must start with 'cdmi_': {key}")
        return v


# Capabilities every EOS QoS class supports
DEFAULT_CAPABILITIES: Dict[str, Any] = {
    "cdmi_capabilities_templates": True,
    "cdmi_capabilities_exact_inherit": True,
    "cdmi_data_redundancy": True,
    "cdmi_geographic_placement": True,
    "cdmi_latency": True,
}


def _load_spec(path: str) -> CapabilitySetSpec:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return CapabilitySetSpec(**data)


def _candidate_paths(filename: str, explicit: Optional[str]) -> List[str]:
    """Return candidate file paths to search for the capability file."""
    return [
        explicit,
        get_config().get("capabilities_file"),
        os.path.join(os.getcwd(), "config", filename),
        f"/etc/eos-cdmi/{filename}",
    ]


def get_backend_capabilities(
    path: Optional[str] = None,
    default_filename: str = "capabilities.yaml",
) -> Dict[str, Any]:
    """Load the capability set advertised for every QoS class.

    Lookup order:
    - the explicit ``path`` argument
    - the configured capabilities_file (EOS_CDMI_CAPABILITIES_FILE)
    - config/<default_filename>
    - /etc/eos-cdmi/<default_filename>
    Fallback to the built-in capability set on error.
    """
    for candidate in filter(None, _candidate_paths(default_filename, path)):
        if not os.path.isfile(candidate):
            continue
        try:
            spec = _load_spec(candidate)
        except Exception as e:  # noqa: BLE001 - any bad file falls through to the next one
            logger.warning(f"Ignoring capability file {candidate}: {e}")
            continue
        logger.debug(f"Loaded backend capabilities from {candidate}")
        return dict(spec.capabilities)

    return dict(DEFAULT_CAPABILITIES)


@lru_cache(maxsize=1)
def _configured_capabilities() -> Dict[str, Any]:
    return get_backend_capabilities()


def get_configured_capabilities() -> Dict[str, Any]:
    """Return the configured capability set, loading it on first use."""
    return dict(_configured_capabilities())


def clear_capability_cache() -> None:
    """Forget the loaded capability set so the next call reloads it."""
    _configured_capabilities.cache_clear()
