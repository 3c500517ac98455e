"""UI configuration state - reactive map settings bound to sidebar controls.

Wraps MapConfig with Solara reactivity: one reactive per field, so each
sidebar input can be bound on its own and the map re-renders on any edit.
"""

import logging

import solara
from pydantic import BaseModel, ValidationError

from device_map_sim.schemas import MapConfig

logger = logging.getLogger(__name__)


class MapUIConfig:
    """Reactive map configuration.

    Inputs write raw values into the field reactives. `to_map_config`
    validates them; until they validate again the last good config stays in
    effect, so a half-typed palette never blanks the map.
    """

    def __init__(self, default: MapConfig | None = None):
        default = default or MapConfig()
        self.selected_config = solara.reactive(default.name)
        self._last_valid = default
        self._create_reactive_fields(default)

    def _create_reactive_fields(self, model: BaseModel):
        """Create a reactive attribute for every field except the label."""
        for name in type(model).model_fields:
            if name == "name":
                continue
            setattr(self, name, solara.reactive(getattr(model, name)))

    def to_map_config(self) -> MapConfig:
        """Convert reactive state to a validated MapConfig."""
        data = {"name": self.selected_config.value}
        for name in MapConfig.model_fields:
            if name != "name":
                data[name] = getattr(self, name).value
        try:
            config = MapConfig(**data)
        except ValidationError as e:
            logger.warning(f"Invalid map settings, keeping previous config: {e}")
            return self._last_valid
        self._last_valid = config
        return config

    def from_map_config(self, config: MapConfig) -> None:
        """Apply a MapConfig to the reactive state."""
        self.selected_config.value = config.name
        for name in MapConfig.model_fields:
            if name != "name":
                getattr(self, name).value = getattr(config, name)
        self._last_valid = config


# Singleton instance
ui_config = MapUIConfig()
