"""Services package for device state distribution.

This package contains:
- registry.py: SimulationStateRegistry, the observed device collection
- events.py: EventBus for the map's trigger signals
- playback.py: DevicePlayback, replays recorded frames into the registry
- config_manager.py: Map config and recording file loading/saving
"""

from device_map_sim.services.events import (
    CYCLE_BACKGROUND,
    TOGGLE_ISOMETRIC,
    EventBus,
)
from device_map_sim.services.playback import DevicePlayback
from device_map_sim.services.registry import DeviceObserver, SimulationStateRegistry
from device_map_sim.services.registry_instance import (
    event_bus,
    playback,
    simulation_state,
)

__all__ = [
    "CYCLE_BACKGROUND",
    "TOGGLE_ISOMETRIC",
    "EventBus",
    "DevicePlayback",
    "DeviceObserver",
    "SimulationStateRegistry",
    "event_bus",
    "playback",
    "simulation_state",
]
