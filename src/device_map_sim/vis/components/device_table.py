"""Device table: every device in the current collection, hidden ones included."""

import pandas as pd
import solara

from device_map_sim.core.projection import assign_colors
from device_map_sim.schemas import DeviceCollection, MapConfig, device_to_row
from device_map_sim.schemas.columns import DEVICE_TABLE_COLUMNS
from device_map_sim.services import simulation_state
from device_map_sim.vis.state.config import ui_config


def devices_dataframe(
    devices: DeviceCollection, config: MapConfig | None = None
) -> pd.DataFrame:
    """Flatten devices into a DataFrame, with the color each one is drawn in."""
    config = config or MapConfig()
    colors = assign_colors(devices, config)
    rows = [device_to_row(d, c) for d, c in zip(devices, colors)]
    return pd.DataFrame(rows, columns=DEVICE_TABLE_COLUMNS)


@solara.component
def DeviceTable(config: MapConfig | None = None):
    """Tabular view of the simulation state, refreshed on every publish."""
    devices, set_devices = solara.use_state(simulation_state.devices)

    class _TableObserver:
        def on_notify(self, devices: DeviceCollection) -> None:
            set_devices(devices)

    def subscribe():
        observer = _TableObserver()
        simulation_state.register_observer(observer)
        set_devices(simulation_state.devices)
        return lambda: simulation_state.remove_observer(observer)

    solara.use_effect(subscribe, [])

    df = devices_dataframe(devices, config or ui_config.to_map_config())
    with solara.Card("Devices"):
        if df.empty:
            solara.Text("No devices published yet.", style="color: #888;")
        else:
            solara.DataFrame(df, items_per_page=20)
