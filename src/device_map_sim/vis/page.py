"""Root page for the Solara application.

Logic is distributed across `vis/components` and `vis/state`.
"""

import logging
from pathlib import Path

import solara

from device_map_sim.vis.components import (
    DeviceMap,
    DeviceTable,
    MapConfigView,
    MapControls,
    PlaybackController,
    PlaybackControls,
)

# --- Logging Configuration ---
logger = logging.getLogger("device_map_sim")
logger.setLevel(logging.INFO)
if logger.handlers:
    logger.handlers.clear()

Path("outputs").mkdir(exist_ok=True)
file_handler = logging.FileHandler("outputs/device_map.log")
file_handler.setFormatter(
    logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
)
stream_handler = logging.StreamHandler()
stream_handler.setFormatter(
    logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
)

logger.addHandler(file_handler)
logger.addHandler(stream_handler)


@solara.component
def Page():
    # Inject CSS
    solara.Style(Path(__file__).parent / "assets" / "style.css")

    # Mount the controller (handles the playback loop when is_playing becomes True)
    PlaybackController()

    with solara.Sidebar():
        PlaybackControls()
        MapConfigView()

    with solara.Column(style="height: 100vh; outline: none;"):
        solara.Title("Device Map")
        MapControls()
        DeviceMap()
        DeviceTable()
