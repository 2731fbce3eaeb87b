"""
Parsing Module - Black Box Interface

Purpose: Turn raw EOS command responses into command output
Interface: extract_cmd_output(), extract_retc(), BackendError
Hidden: mgm.proc.* field scanning

A non-empty stderr field is the only condition reported as an error.
"""

from .parse import BackendError, extract_cmd_output, extract_retc

__all__ = ["BackendError", "extract_cmd_output", "extract_retc"]
