"""Device map view state - registry observer and presentation toggles.

A DeviceMapView is the stateful half of the map component. It opts in to
the simulation state registry and the trigger signals when activated, and
opts out again when deactivated. Rendering itself is delegated to the pure
projection in `core.projection`.
"""

import logging
from enum import Enum
from typing import Callable

import solara

from device_map_sim.core.projection import project
from device_map_sim.schemas import (
    DeviceCollection,
    MapConfig,
    RenderDescription,
    ViewState,
)
from device_map_sim.services.events import CYCLE_BACKGROUND, TOGGLE_ISOMETRIC, EventBus
from device_map_sim.services.registry import SimulationStateRegistry

logger = logging.getLogger(__name__)


class ViewLifecycle(str, Enum):
    INACTIVE = "inactive"
    ACTIVE = "active"


class DeviceMapView:
    """Observer of the simulation state that owns the map's presentation state.

    The device cache, view state and render revision are Solara reactives:
    assigning them is what schedules a re-render of any mounted component.
    Headless callers can use `render()` directly.
    """

    def __init__(
        self,
        registry: SimulationStateRegistry,
        bus: EventBus,
        config: MapConfig | None = None,
        on_render: Callable[[RenderDescription], None] | None = None,
    ) -> None:
        self.registry = registry
        self.bus = bus
        self.config = config or MapConfig()
        self.on_render = on_render

        self.lifecycle = ViewLifecycle.INACTIVE
        self.devices: solara.Reactive[DeviceCollection] = solara.reactive([])
        self.view_state: solara.Reactive[ViewState] = solara.reactive(ViewState())
        self.revision = solara.reactive(0)

    @property
    def is_active(self) -> bool:
        return self.lifecycle is ViewLifecycle.ACTIVE

    @property
    def render_count(self) -> int:
        """Number of re-renders requested so far."""
        return self.revision.value

    # --- Lifecycle ---

    def activate(self) -> None:
        """Register with the registry, then listen to both trigger signals."""
        if self.is_active:
            logger.debug("activate() on an active view ignored")
            return

        self.registry.register_observer(self)
        self.bus.subscribe(CYCLE_BACKGROUND, self.cycle_pattern)
        self.bus.subscribe(TOGGLE_ISOMETRIC, self.toggle_isometric)
        self.lifecycle = ViewLifecycle.ACTIVE

        # Pick up whatever was published before we were mounted
        self.devices.value = self.registry.devices
        self.request_render()
        logger.debug(f"Device map view {id(self):#x} activated")

    def deactivate(self) -> None:
        """Detach trigger signals, then leave the registry.

        Signals go first so no trigger can reach a view that is half torn
        down. Deactivating an inactive view does nothing.
        """
        if not self.is_active:
            return

        self.bus.unsubscribe(TOGGLE_ISOMETRIC, self.toggle_isometric)
        self.bus.unsubscribe(CYCLE_BACKGROUND, self.cycle_pattern)
        self.registry.remove_observer(self)
        self.lifecycle = ViewLifecycle.INACTIVE
        logger.debug(f"Device map view {id(self):#x} deactivated")

    # --- Registry observer ---

    def on_notify(self, devices: DeviceCollection) -> None:
        """Replace the device cache wholesale and request a re-render."""
        if not self.is_active:
            logger.debug("Notification for inactive view dropped")
            return
        self.devices.value = list(devices)
        self.request_render()

    # --- Trigger handlers ---

    def cycle_pattern(self) -> None:
        state = self.view_state.value
        next_idx = (state.pattern_index + 1) % self.config.pattern_count
        self.view_state.value = state.model_copy(update={"pattern_index": next_idx})
        self.request_render()

    def toggle_isometric(self) -> None:
        state = self.view_state.value
        self.view_state.value = state.model_copy(
            update={"isometric": not state.isometric}
        )
        self.request_render()

    # --- Rendering ---

    def request_render(self) -> None:
        self.revision.value = self.revision.value + 1
        if self.on_render is not None:
            self.on_render(self.render())

    def render(self) -> RenderDescription:
        return project(self.devices.value, self.view_state.value, self.config)
