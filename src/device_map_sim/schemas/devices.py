"""Device Schemas.

Devices are owned by the simulation producer. The map only reads them, so
every model here is frozen.
"""

import logging
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .columns import ColumnNames

logger = logging.getLogger(__name__)


class Position(BaseModel):
    """Device position in simulation units."""

    x: float = Field(0.0, description="Screen-plane horizontal coordinate")
    y: float = Field(0.0, description="Screen-plane vertical coordinate")
    z: float = Field(0.0, description="Height, rendered as sprite depth")

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)


class Orientation(BaseModel):
    """Device orientation in degrees. Passed through to the sprite as-is."""

    yaw: float = Field(0.0, description="Rotation about the vertical axis (deg)")
    pitch: float = Field(0.0, description="Rotation about the lateral axis (deg)")
    roll: float = Field(0.0, description="Rotation about the longitudinal axis (deg)")

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)


class Device(BaseModel):
    """A simulated device as published by the simulation state registry.

    `position` and `orientation` are optional so a partially populated record
    can still travel with the collection. The projection skips such records.
    """

    name: str = Field(..., description="Identifier and accessible label")
    visible: bool = Field(True, description="Hidden devices are not rendered")
    position: Position | None = Field(None, description="Position (sim units)")
    orientation: Orientation | None = Field(None, description="Orientation (deg)")
    device_type: str | None = Field(None, description="Free-form device kind")

    model_config = ConfigDict(frozen=True)


# Ordered sequence of devices, producer order. Not deduplicated by name.
DeviceCollection = list[Device]


def parse_devices(raw: Iterable[Any]) -> DeviceCollection:
    """Validate a producer payload into a DeviceCollection.

    Accepts Device instances or plain dicts. Entries that fail validation are
    logged and dropped; the rest keep their relative order.
    """
    devices: DeviceCollection = []
    for idx, item in enumerate(raw):
        if isinstance(item, Device):
            devices.append(item)
            continue
        try:
            devices.append(Device.model_validate(item))
        except ValidationError as e:
            logger.warning(f"Dropping invalid device record #{idx}: {e}")
    return devices


def device_to_row(device: Device, color: str | None = None) -> dict:
    """Flatten a device into a table row keyed by ColumnNames."""
    pos = device.position
    ori = device.orientation
    return {
        ColumnNames.NAME: device.name,
        ColumnNames.DEVICE_TYPE: device.device_type,
        ColumnNames.VISIBLE: device.visible,
        ColumnNames.X: pos.x if pos else None,
        ColumnNames.Y: pos.y if pos else None,
        ColumnNames.Z: pos.z if pos else None,
        ColumnNames.YAW: ori.yaw if ori else None,
        ColumnNames.PITCH: ori.pitch if ori else None,
        ColumnNames.ROLL: ori.roll if ori else None,
        ColumnNames.COLOR: color,
    }
