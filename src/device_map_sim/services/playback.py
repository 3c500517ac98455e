"""Recording playback - feeds recorded device frames into the registry.

A recording stands in for the external simulation producer: each step
publishes one full frame through `SimulationStateRegistry.update`.
"""

import asyncio
import logging

import solara

from device_map_sim.schemas import DeviceCollection
from device_map_sim.schemas.defaults import DEFAULT_PLAYBACK_INTERVAL
from device_map_sim.services.registry import SimulationStateRegistry

logger = logging.getLogger(__name__)


class DevicePlayback:
    """Steps through recorded frames and publishes them.

    `frame_index` and `is_playing` are Solara reactives so playback controls
    re-render as the recording advances.
    """

    def __init__(
        self,
        registry: SimulationStateRegistry,
        frames: list[DeviceCollection] | None = None,
        interval: float = DEFAULT_PLAYBACK_INTERVAL,
    ) -> None:
        self.registry = registry
        self.interval = interval
        self.frames: list[DeviceCollection] = list(frames or [])
        self.frame_index = solara.reactive(0)
        self.is_playing = solara.reactive(False)
        self.recording_name: solara.Reactive[str | None] = solara.reactive(None)

    @property
    def frame_count(self) -> int:
        return len(self.frames)

    @property
    def finished(self) -> bool:
        return self.frame_index.value >= len(self.frames)

    def load(self, frames: list[DeviceCollection], name: str | None = None) -> None:
        """Replace the recording and rewind. Does not publish anything."""
        self.frames = list(frames)
        self.recording_name.value = name
        self.reset()
        logger.info(f"Loaded recording {name or '<unnamed>'}: {len(frames)} frames")

    def reset(self) -> None:
        self.is_playing.value = False
        self.frame_index.value = 0

    def step(self) -> bool:
        """Publish the next frame. Returns False once the recording is exhausted."""
        if self.finished:
            logger.debug("Playback step requested past the last frame")
            return False

        idx = self.frame_index.value
        delivered = self.registry.update(self.frames[idx])
        self.frame_index.value = idx + 1
        logger.debug(
            f"Published frame {idx + 1}/{len(self.frames)} to {delivered} views"
        )
        return True

    def play(self) -> None:
        if self.finished:
            self.reset()
        self.is_playing.value = bool(self.frames)

    def pause(self) -> None:
        self.is_playing.value = False

    async def play_loop(self) -> None:
        """Async loop that publishes frames until paused or exhausted.

        Triggered by PlaybackController when is_playing transitions to True.
        """
        if not self.is_playing.value:
            return

        logger.info("Playback loop started")
        try:
            while self.is_playing.value:
                if not self.step():
                    logger.info("Recording finished")
                    self.is_playing.value = False
                    break
                await asyncio.sleep(self.interval)
        except asyncio.CancelledError:
            logger.debug("Playback loop task cancelled gracefully.")
            raise
        except Exception as e:
            logger.error(f"Error in playback loop: {e}", exc_info=True)
            self.is_playing.value = False
