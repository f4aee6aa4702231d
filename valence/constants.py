"""Protocol-wide constants."""

PROTOCOL_VERSION: int = 760
"""The Minecraft protocol version this library targets."""

VERSION_NAME: str = "1.19.2"
"""The name of the Minecraft version this library targets."""

LIBRARY_NAMESPACE: str = "valence"
"""The namespace this library uses for its own identifiers."""

STANDARD_TPS: int = 20
"""Minecraft's standard ticks per second."""