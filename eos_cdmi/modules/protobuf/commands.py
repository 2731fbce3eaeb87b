"""Base64 encoded protobuf payloads for the EOS "qos ls" command."""

from typing import Optional

QOS_LIST = "CAGiAQIKAPgBAQ=="

QOS_LIST_CLASS = {
    "disk_plain": "CAGiAQ4KDAoKZGlza19wbGFpbg==",
    "disk_replica": "CAGiARAKDgoMZGlza19yZXBsaWNh",
}


def qos_list() -> str:
    """Return the payload listing all QoS classes."""
    return QOS_LIST


def qos_list_class(qos_class_name: str) -> Optional[str]:
    """Return the payload describing one QoS class, or None if unknown."""
    return QOS_LIST_CLASS.get(qos_class_name)
