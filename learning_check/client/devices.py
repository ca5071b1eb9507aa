"""
Local media device probing.

Answers whether a camera and a microphone can be opened on this machine
before a learning check conversation is started. Never touches the
network.

Dependencies: pathlib, os (stdlib)
System role: Hair-check device capability source
"""

import asyncio
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeviceStatus:
    """Availability of the local capture devices."""

    camera: bool
    microphone: bool
    permission_denied: bool = False

    @property
    def ready(self) -> bool:
        """True when both camera and microphone can be opened."""
        return self.camera and self.microphone


class DeviceProbe(Protocol):
    """Anything that can report local camera/microphone availability."""

    async def check(self) -> DeviceStatus:
        ...


class StaticDeviceProbe:
    """Probe with fixed answers, for headless runs and tests."""

    def __init__(
        self,
        camera: bool = True,
        microphone: bool = True,
        permission_denied: bool = False,
    ) -> None:
        self.status = DeviceStatus(
            camera=camera,
            microphone=microphone,
            permission_denied=permission_denied,
        )
        self.calls = 0

    async def check(self) -> DeviceStatus:
        self.calls += 1
        return self.status


class SystemDeviceProbe:
    """
    Linux device probe.

    A camera is a /dev/video* node and a microphone is an ALSA capture
    node (/dev/snd/pcmC*D*c). Nodes that exist but cannot be opened for
    reading count as permission denied.
    """

    def __init__(
        self,
        video_root: Path = Path("/dev"),
        sound_root: Path = Path("/dev/snd"),
    ) -> None:
        """
        Initialize system probe.

        Args:
            video_root: Directory holding video4linux nodes
            sound_root: Directory holding ALSA nodes
        """
        self.video_root = video_root
        self.sound_root = sound_root

    def _scan(self) -> DeviceStatus:
        cameras = sorted(self.video_root.glob("video*"))
        microphones = sorted(self.sound_root.glob("pcmC*D*c"))

        readable_cameras = [p for p in cameras if os.access(p, os.R_OK)]
        readable_microphones = [p for p in microphones if os.access(p, os.R_OK)]

        denied = (bool(cameras) and not readable_cameras) or (
            bool(microphones) and not readable_microphones
        )
        logger.debug(
            "Device scan complete",
            extra={
                "cameras": len(cameras),
                "microphones": len(microphones),
                "permission_denied": denied,
            },
        )
        return DeviceStatus(
            camera=bool(readable_cameras),
            microphone=bool(readable_microphones),
            permission_denied=denied,
        )

    async def check(self) -> DeviceStatus:
        # Filesystem scan off the event loop
        return await asyncio.to_thread(self._scan)
