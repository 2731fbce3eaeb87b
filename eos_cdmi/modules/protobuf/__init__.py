"""
Protobuf Module - Black Box Interface

Purpose: Provide the serialized EOS QoS commands
Interface: qos_list(), qos_list_class()
Hidden: Payload contents

Payloads are precomputed; nothing here encodes protobuf messages.
"""

from .commands import qos_list, qos_list_class

__all__ = ["qos_list", "qos_list_class"]
