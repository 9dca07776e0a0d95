"""Device bridge access.

This module wraps the adb executable: locating it and running the shell,
pull and push commands the remote backend needs.
"""

from explorefs.bridge.client import READY_STATE, DeviceBridgeClient
from explorefs.bridge.discovery import BRIDGE_NAME, candidate_locations, find_bridge_binary

__all__ = [
    "BRIDGE_NAME",
    "READY_STATE",
    "DeviceBridgeClient",
    "candidate_locations",
    "find_bridge_binary",
]
