"""Schemas package.

- devices.py: Device models supplied by the simulation (Device, Position, ...)
- config.py: Presentation configuration (MapConfig, ViewState)
- render.py: Render output models (RenderDescription, SpriteDescriptor, ...)
"""

from .config import MapConfig, ViewState
from .devices import (
    Device,
    DeviceCollection,
    Orientation,
    Position,
    device_to_row,
    parse_devices,
)
from .render import ContainerTransform, RenderDescription, SpriteDescriptor

__all__ = [
    "MapConfig",
    "ViewState",
    "Device",
    "DeviceCollection",
    "Orientation",
    "Position",
    "device_to_row",
    "parse_devices",
    "ContainerTransform",
    "RenderDescription",
    "SpriteDescriptor",
]
