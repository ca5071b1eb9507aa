"""
Test suite for the hair-check screen.

System role: Verification of the local device gate
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from learning_check.client.devices import StaticDeviceProbe
from learning_check.client.hair_check import HairCheck


def _hair_check(probe: StaticDeviceProbe):
    on_join = AsyncMock()
    on_cancel = MagicMock()
    return HairCheck(probe=probe, on_join=on_join, on_cancel=on_cancel), on_join, on_cancel


@pytest.mark.asyncio
async def test_join_runs_callback_when_devices_ready():
    hair_check, on_join, _ = _hair_check(StaticDeviceProbe())

    joined = await hair_check.request_join()

    assert joined is True
    assert hair_check.device_error is None
    on_join.assert_awaited_once()


@pytest.mark.asyncio
async def test_join_blocked_when_microphone_missing():
    hair_check, on_join, _ = _hair_check(StaticDeviceProbe(microphone=False))

    joined = await hair_check.request_join()

    assert joined is False
    on_join.assert_not_called()
    assert hair_check.device_error.reason == "not_found"
    assert hair_check.device_error.message == (
        "No microphone found. Connect a device and try again."
    )
    assert hair_check.device_error.details["missing"] == ["microphone"]


@pytest.mark.asyncio
async def test_join_blocked_when_permission_denied():
    hair_check, on_join, _ = _hair_check(
        StaticDeviceProbe(camera=False, microphone=False, permission_denied=True)
    )

    joined = await hair_check.request_join()

    assert joined is False
    on_join.assert_not_called()
    assert hair_check.device_error.reason == "permission_denied"
    assert hair_check.device_error.message.startswith(
        "Permission to use the camera and microphone was denied."
    )


@pytest.mark.asyncio
async def test_successful_retry_clears_device_error():
    probe = StaticDeviceProbe(camera=False)
    hair_check, on_join, _ = _hair_check(probe)
    await hair_check.request_join()

    probe.status = StaticDeviceProbe().status
    joined = await hair_check.request_join()

    assert joined is True
    assert hair_check.device_error is None
    on_join.assert_awaited_once()


@pytest.mark.asyncio
async def test_cancel_clears_error_and_calls_back():
    hair_check, _, on_cancel = _hair_check(StaticDeviceProbe(camera=False))
    await hair_check.request_join()

    hair_check.cancel()

    assert hair_check.device_error is None
    on_cancel.assert_called_once_with()
