"""
Capability mapping for EOS QoS classes.

Converts EOS QoS class descriptions (the JSON printed by "eos qos ls" and
"eos fileinfo --json") into CDMI backend capability records.

Design Principles:
- Graceful degradation: missing or malformed descriptive fields are dropped,
  never reported as errors
- All-or-nothing: metadata and children lists are either complete or empty
- Stateless: every function is pure and safe to call from any thread
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, TypeAdapter, ValidationError

from eos_cdmi.modules.config import get_configured_capabilities

logger = logging.getLogger("eos_cdmi.capability")


class CapabilityType(str, Enum):
    """Kind of CDMI object a capability applies to."""

    CONTAINER = "container"
    DATAOBJECT = "dataobject"


class BackendCapability(BaseModel):
    """CDMI capability record for one QoS class."""

    name: str
    type: CapabilityType
    metadata: Dict[str, Any] = Field(default_factory=dict)
    capabilities: Dict[str, Any] = Field(default_factory=dict)


class InvalidQoSDescription(ValueError):
    """Raised when a QoS description lacks a required field."""


# Field lookup results


class LookupStatus(str, Enum):
    """Outcome of reading one field from a JSON description."""

    PRESENT = "present"
    ABSENT = "absent"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class FieldLookup:
    status: LookupStatus
    value: Any = None

    @property
    def ok(self) -> bool:
        return self.status is LookupStatus.PRESENT


class _ChildEntry(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: StrictStr


_OBJECT = TypeAdapter(Dict[str, Any])
_INT = TypeAdapter(StrictInt)
_STR = TypeAdapter(StrictStr)
_STR_LIST = TypeAdapter(List[StrictStr])
_CHILDREN = TypeAdapter(List[_ChildEntry])

_TYPE_NAMES = {
    CapabilityType.CONTAINER: "container",
    CapabilityType.DATAOBJECT: "dataobject",
}


def lookup_field(data: Any, key: str, adapter: TypeAdapter) -> FieldLookup:
    """
    Read and validate a single field of a JSON object.

    Args:
        data: Decoded JSON value expected to be an object
        key: Field name
        adapter: Validator for the field's expected shape

    Returns:
        FieldLookup carrying the validated value when PRESENT
    """
    if not isinstance(data, Mapping) or key not in data:
        return FieldLookup(LookupStatus.ABSENT)

    try:
        return FieldLookup(LookupStatus.PRESENT, adapter.validate_python(data[key]))
    except ValidationError:
        return FieldLookup(LookupStatus.MALFORMED)


def metadata_from_qos_json(description: Any, suffix: str = "") -> Dict[str, Any]:
    """
    Extract metadata information from a QoS description.

    The description may be either for a QoS class or for an entry.

    Args:
        description: Decoded JSON QoS description
        suffix: Suffix appended to every metadata key

    Returns:
        Mapping with the three CDMI metadata keys, or an empty mapping
        if any of them is missing or malformed
    """
    metadata = lookup_field(description, "metadata", _OBJECT)
    if not metadata.ok:
        logger.debug(f"No usable metadata object ({metadata.status.value}). Returning empty map.")
        return {}

    redundancy = lookup_field(metadata.value, "cdmi_data_redundancy_provided", _INT)
    latency = lookup_field(metadata.value, "cdmi_latency_provided", _INT)
    placement = lookup_field(metadata.value, "cdmi_geographic_placement_provided", _STR_LIST)

    if not (redundancy.ok and latency.ok and placement.ok):
        logger.debug("Failed to retrieve metadata. Returning empty map.")
        return {}

    return {
        f"cdmi_data_redundancy{suffix}": redundancy.value,
        f"cdmi_latency{suffix}": latency.value,
        f"cdmi_geographic_placement{suffix}": placement.value,
    }


def backend_capability_from_json(
    description: Any,
    type: CapabilityType,
    capabilities: Optional[Dict[str, Any]] = None,
) -> BackendCapability:
    """
    Create a CDMI backend capability from an EOS QoS class description.

    Args:
        description: Decoded JSON QoS class description
        type: Capability type the record describes
        capabilities: Capability set to advertise (configured set if None)

    Returns:
        BackendCapability for the class

    Raises:
        InvalidQoSDescription: If the description has no string 'name'
        ValueError: If type is not a CapabilityType
    """
    type = CapabilityType(type)

    name = lookup_field(description, "name", _STR)
    if not name.ok:
        raise InvalidQoSDescription(f"QoS description has no valid 'name' ({name.status.value})")

    metadata = metadata_from_qos_json(description, "")

    transition = lookup_field(description, "transition", _STR_LIST)
    if transition.ok:
        metadata["cdmi_capabilities_allowed"] = capabilities_allowed(transition.value, type)
    else:
        logger.debug(f"No transitions for QoS class {name.value} ({transition.status.value})")

    if capabilities is None:
        capabilities = get_configured_capabilities()

    return BackendCapability(
        name=name.value,
        type=type,
        metadata=metadata,
        capabilities=dict(capabilities),
    )


def children_from_fileinfo_json(fileinfo: Any) -> List[str]:
    """
    Extract the list of children from a JSON fileinfo response.

    Returns an empty list for files, and for directories whose children
    list is missing or holds a malformed entry.
    """
    if not fileinfo_is_directory(fileinfo):
        return []

    children = lookup_field(fileinfo, "children", _CHILDREN)
    if not children.ok:
        logger.debug("Failed to retrieve children information. Returning empty list.")
        return []

    return [child.name for child in children.value]


def fileinfo_is_directory(fileinfo: Any) -> bool:
    """Return True if the fileinfo JSON object describes a directory."""
    # EOS only reports a treesize for directories
    return isinstance(fileinfo, Mapping) and "treesize" in fileinfo


def qos_class_from_capability_uri(capability_uri: str) -> str:
    """Return the QoS class named by a capability URI."""
    trimmed = capability_uri.strip()
    parts = [part for part in trimmed.split("/") if part]
    if not parts:
        return trimmed
    return parts[-1]


def capability_type_to_string(type: Any) -> Optional[str]:
    """Return the URI name of a capability type, or None for unknown types."""
    if not isinstance(type, CapabilityType):
        return None
    return _TYPE_NAMES.get(type)


def capabilities_allowed(transitions: List[str], type: CapabilityType) -> List[str]:
    """Turn allowed QoS class transitions into CDMI capability URIs."""
    type_name = capability_type_to_string(type)
    if type_name is None:
        raise ValueError(f"Unknown capability type: {type!r}")

    return [f"/cdmi_capabilities/{type_name}/{allowed}/" for allowed in transitions]
