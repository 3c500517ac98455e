"""State management package for the map views.

- view: DeviceMapView, the registry observer behind each mounted map
- config: MapUIConfig, reactive map settings edited from the sidebar
"""

from device_map_sim.vis.state.config import MapUIConfig, ui_config
from device_map_sim.vis.state.view import DeviceMapView, ViewLifecycle

__all__ = ["DeviceMapView", "MapUIConfig", "ViewLifecycle", "ui_config"]
