"""
EOS storage backend for the CDMI capability service.

Runs QoS commands through an injected runner and turns their responses
into CDMI capability records and object status.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Protocol

from pydantic import BaseModel, Field

from eos_cdmi.modules.capability import (
    BackendCapability,
    CapabilityType,
    InvalidQoSDescription,
    backend_capability_from_json,
    children_from_fileinfo_json,
    fileinfo_is_directory,
    metadata_from_qos_json,
    qos_class_from_capability_uri,
)
from eos_cdmi.modules.config import get_config, get_configured_capabilities
from eos_cdmi.modules.parsing import BackendError, extract_cmd_output
from eos_cdmi.modules.protobuf import qos_list, qos_list_class

logger = logging.getLogger("eos_cdmi.backend")


class CommandRunner(Protocol):
    """Protocol for command transports - allows swappable implementations."""

    def run(self, command: str) -> str:
        """
        Send a command to the EOS MGM.

        Args:
            command: Opaque command payload

        Returns:
            Raw command response (mgm.proc.* format)
        """
        ...


class ObjectStatus(BaseModel):
    """Current QoS status of a namespace entry."""

    type: CapabilityType
    children: List[str] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)


class EosStorageBackend:
    """
    CDMI storage backend backed by EOS QoS classes.

    Holds no state besides the runner and the capability set, so one
    instance can serve concurrent requests.
    """

    def __init__(self, runner: CommandRunner, capabilities: Optional[Dict[str, Any]] = None):
        """
        Initialize the backend.

        Args:
            runner: Command transport to the EOS MGM
            capabilities: Capability set advertised by every class
                (loaded from configuration if None)
        """
        self.runner = runner
        self.capabilities = (
            dict(capabilities) if capabilities is not None else get_configured_capabilities()
        )

    def _run_json(self, command: str) -> Any:
        """Run a command and decode its JSON output."""
        output = extract_cmd_output(self.runner.run(command))

        try:
            return json.loads(output)
        except json.JSONDecodeError as e:
            raise BackendError(f"Command output is not valid JSON: {e}") from e

    def get_capabilities(self) -> List[BackendCapability]:
        """
        List the capabilities of every QoS class.

        Returns:
            One container record per class followed by one dataobject
            record per class

        Raises:
            BackendError: If the command fails or returns unusable output
        """
        response = self._run_json(qos_list())
        descriptions = response if isinstance(response, list) else [response]

        records = []
        for type in (CapabilityType.CONTAINER, CapabilityType.DATAOBJECT):
            for description in descriptions:
                try:
                    records.append(
                        backend_capability_from_json(description, type, self.capabilities)
                    )
                except InvalidQoSDescription as e:
                    logger.warning(f"Skipping QoS class: {e}")

        logger.info(f"Retrieved {len(records)} capabilities")
        return records

    def get_capability(
        self, capability_uri: str, type: CapabilityType
    ) -> Optional[BackendCapability]:
        """
        Retrieve the capability named by a CDMI capability URI.

        Args:
            capability_uri: e.g. /cdmi_capabilities/container/disk_plain/
            type: Capability type of the record

        Returns:
            BackendCapability, or None if the QoS class is unknown

        Raises:
            BackendError: If the command fails or returns unusable output
            InvalidQoSDescription: If the class description has no name
        """
        qos_class = qos_class_from_capability_uri(capability_uri)
        command = qos_list_class(qos_class)
        if command is None:
            logger.debug(f"Unknown QoS class: {qos_class}")
            return None

        description = self._run_json(command)
        return backend_capability_from_json(description, type, self.capabilities)

    def get_current_status(self, fileinfo_command: str) -> ObjectStatus:
        """
        Retrieve the QoS status of a namespace entry.

        Args:
            fileinfo_command: Command returning the entry's JSON fileinfo

        Returns:
            ObjectStatus with children (for directories) and the entry's
            QoS metadata

        Raises:
            BackendError: If the command fails or returns unusable output
        """
        fileinfo = self._run_json(fileinfo_command)
        suffix = get_config().get("entry_metadata_suffix")

        return ObjectStatus(
            type=(
                CapabilityType.CONTAINER
                if fileinfo_is_directory(fileinfo)
                else CapabilityType.DATAOBJECT
            ),
            children=children_from_fileinfo_json(fileinfo),
            metadata=metadata_from_qos_json(fileinfo, suffix),
        )
