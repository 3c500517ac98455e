"""Process-wide registry, event bus and playback singletons.

Separated from registry.py so tests can build private instances without
touching the shared ones.
"""

from device_map_sim.services.events import EventBus
from device_map_sim.services.playback import DevicePlayback
from device_map_sim.services.registry import SimulationStateRegistry

# Singleton instances, created empty at import
simulation_state = SimulationStateRegistry()
event_bus = EventBus()
playback = DevicePlayback(simulation_state)
