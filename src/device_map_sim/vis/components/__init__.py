"""Expose all components from submodules for cleaner importing."""

from .auto_config import MapConfigView
from .device_map import CubeSprite, DeviceMap, MapControls
from .device_table import DeviceTable
from .playback import PlaybackController, PlaybackControls

__all__ = [
    "CubeSprite",
    "DeviceMap",
    "MapConfigView",
    "MapControls",
    "DeviceTable",
    "PlaybackController",
    "PlaybackControls",
]
