"""
Capability Module - Black Box Interface

Purpose: Map EOS QoS class descriptions to CDMI capability records
Interface: backend_capability_from_json(), metadata_from_qos_json(),
           children_from_fileinfo_json(), qos_class_from_capability_uri()
Hidden: JSON field validation, URI formatting

Provides graceful degradation - missing descriptive fields are left out
of the record instead of failing the request.
"""

from .capability import (
    BackendCapability,
    CapabilityType,
    FieldLookup,
    InvalidQoSDescription,
    LookupStatus,
    backend_capability_from_json,
    capabilities_allowed,
    capability_type_to_string,
    children_from_fileinfo_json,
    fileinfo_is_directory,
    lookup_field,
    metadata_from_qos_json,
    qos_class_from_capability_uri,
)

__all__ = [
    "BackendCapability",
    "CapabilityType",
    "FieldLookup",
    "InvalidQoSDescription",
    "LookupStatus",
    "backend_capability_from_json",
    "capabilities_allowed",
    "capability_type_to_string",
    "children_from_fileinfo_json",
    "fileinfo_is_directory",
    "lookup_field",
    "metadata_from_qos_json",
    "qos_class_from_capability_uri",
]
