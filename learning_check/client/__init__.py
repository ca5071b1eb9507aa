"""
Client-side learning check flow.

The orchestrator drives ready -> hair check -> call; the session client
is its only path to the conversation-session API.
"""

from learning_check.client.devices import (
    DeviceProbe,
    DeviceStatus,
    StaticDeviceProbe,
    SystemDeviceProbe,
)
from learning_check.client.hair_check import HairCheck
from learning_check.client.orchestrator import LearningCheckOrchestrator
from learning_check.client.renderer import BrowserRenderer, ConversationRenderer, NullRenderer
from learning_check.client.session_client import ConversationSessionClient

__all__ = [
    "BrowserRenderer",
    "ConversationRenderer",
    "ConversationSessionClient",
    "DeviceProbe",
    "DeviceStatus",
    "HairCheck",
    "LearningCheckOrchestrator",
    "NullRenderer",
    "StaticDeviceProbe",
    "SystemDeviceProbe",
]
