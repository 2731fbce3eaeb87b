"""
Backend Module - Black Box Interface

Purpose: Answer CDMI capability queries from EOS QoS commands
Interface: EosStorageBackend.get_capabilities(), get_capability(),
           get_current_status()
Hidden: Command payloads, response parsing, JSON decoding

The command transport is injected, so any MGM client can be plugged in.
"""

from .backend import CommandRunner, EosStorageBackend, ObjectStatus

__all__ = ["CommandRunner", "EosStorageBackend", "ObjectStatus"]
