"""
Hair-check screen.

Pre-flight gate in front of a learning check conversation: the join
callback only runs once camera and microphone are confirmed. Device
problems stay on this screen and never reach the conversation API.

Dependencies: learning_check.client.devices
System role: Local device gate for the session flow
"""

import logging
from typing import Awaitable, Callable

from learning_check.client.devices import DeviceProbe
from learning_check.core.exceptions import LocalDeviceError
from learning_check.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class HairCheck:
    """Camera/microphone preview screen that guards entry into a call."""

    def __init__(
        self,
        probe: DeviceProbe,
        on_join: Callable[[], Awaitable[None]],
        on_cancel: Callable[[], None],
    ) -> None:
        """
        Initialize hair check.

        Args:
            probe: Source of local device availability
            on_join: Awaited once devices are confirmed
            on_cancel: Called when the learner backs out
        """
        self._probe = probe
        self._on_join = on_join
        self._on_cancel = on_cancel
        self.device_error: LocalDeviceError | None = None

    async def check_devices(self) -> LocalDeviceError | None:
        """
        Probe local devices.

        Returns:
            LocalDeviceError | None: The problem found, or None when both devices are usable
        """
        status = await self._probe.check()
        if status.ready:
            return None

        missing = [
            name
            for name, available in (("camera", status.camera), ("microphone", status.microphone))
            if not available
        ]
        if status.permission_denied:
            return LocalDeviceError(
                f"Permission to use the {' and '.join(missing)} was denied. "
                "Allow access and try again.",
                reason="permission_denied",
                details={"missing": missing},
            )
        return LocalDeviceError(
            f"No {' or '.join(missing)} found. Connect a device and try again.",
            reason="not_found",
            details={"missing": missing},
        )

    async def request_join(self) -> bool:
        """
        Run the device check and hand over to the join callback if it passes.

        Returns:
            bool: True if the join callback ran, False if blocked by a device problem
        """
        self.device_error = await self.check_devices()
        if self.device_error is not None:
            log_with_context(
                logger,
                logging.WARNING,
                f"Hair check blocked join: {self.device_error.message}",
                reason=self.device_error.reason,
                missing=self.device_error.details.get("missing"),
            )
            return False

        await self._on_join()
        return True

    def cancel(self) -> None:
        """Leave the hair check and return to the ready screen."""
        self.device_error = None
        self._on_cancel()
