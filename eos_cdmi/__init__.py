"""
EOS CDMI - Storage backend adapter for the CDMI capability model

Translates EOS command responses and QoS class descriptions into
CDMI capability records.

Architecture:
- Each module is self-contained with clear interfaces
- Modules are stateless and safe to share between threads
- Command transport is supplied by the caller

Modules:
- config: Configuration and backend capability set
- parsing: EOS command response parsing
- capability: QoS description to CDMI capability mapping
- protobuf: Precomputed QoS command payloads
- backend: Storage backend facade
"""

__version__ = "1.0.0"
