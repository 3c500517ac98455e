"""Headless entry point: replay recorded device frames through a map view."""

import logging
import sys

from pydantic import ValidationError

from device_map_sim.schemas import DeviceCollection, MapConfig, RenderDescription
from device_map_sim.services import (
    DevicePlayback,
    EventBus,
    SimulationStateRegistry,
    config_manager,
)
from device_map_sim.vis.state import DeviceMapView


def print_render(render: RenderDescription) -> None:
    """Print one render as the accessible descriptions of its sprites."""
    mode = "isometric" if render.container.transform != "none" else "flat"
    pattern = render.container.pattern_class
    print(f"  [{mode}, {pattern}] {len(render.sprites)} devices")
    for sprite in render.sprites:
        print(f"    {sprite.color:<7} {sprite.aria_label}")
    for name in render.skipped:
        print(f"    (skipped malformed device '{name}')")


def run_recording(
    name: str, frames: list[DeviceCollection], config: MapConfig
) -> None:
    """Replay a single recording.

    Args:
        name: Recording name.
        frames: Device collections, one per published update.
        config: Map configuration.
    """
    registry = SimulationStateRegistry()
    view = DeviceMapView(registry, EventBus(), config)
    view.activate()

    print(f"--- Replaying {name}: {len(frames)} frames ---")
    player = DevicePlayback(registry, frames, interval=config.playback_interval)
    while player.step():
        print(f"Frame {player.frame_index.value}:")
        print_render(view.render())

    view.deactivate()
    print("\n")


def main() -> None:
    """Load recordings and replay them."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    config = MapConfig()
    if "default.json" in config_manager.list_configs():
        try:
            config = config_manager.load_config("default.json")
        except ValidationError as e:
            print(f"Invalid map config: {e}")
            sys.exit(1)

    recordings = config_manager.list_recordings()
    if not recordings:
        print("No recordings found.")
        return

    for filename in recordings:
        try:
            frames = config_manager.load_frames(filename)
        except ValueError as e:
            print(f"Skipping {filename}: {e}")
            continue
        run_recording(filename, frames, config)


if __name__ == "__main__":
    main()
