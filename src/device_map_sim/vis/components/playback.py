"""Playback controls for recorded device frames."""

import solara
import solara.lab

from device_map_sim.services import config_manager, playback
from device_map_sim.vis.state.config import ui_config


@solara.component
def PlaybackController():
    """Invisible component to handle the playback loop."""
    playback.interval = ui_config.to_map_config().playback_interval
    # raise_error=False: a cancelled loop must not surface as a UI error
    solara.lab.use_task(
        playback.play_loop,
        dependencies=[playback.is_playing.value],
        raise_error=False,
    )
    return solara.Div(style="display: none;")


@solara.component
def PlaybackControls():
    """Recording picker with play / pause / step buttons."""
    recordings, set_recordings = solara.use_state(config_manager.list_recordings())
    error, set_error = solara.use_state(None)

    def select(filename):
        if not filename:
            return
        try:
            playback.load(config_manager.load_frames(filename), name=filename)
            set_error(None)
        except (FileNotFoundError, ValueError) as e:
            set_error(str(e))

    with solara.Column(classes=["sidebar-compact"]):
        solara.Markdown("**RECORDING**", style="font-size: 0.9rem; opacity: 0.7;")
        with solara.Row(style="align-items: center;"):
            solara.Select(
                label="Recording",
                values=recordings,
                value=playback.recording_name.value,
                on_value=select,
            )
            solara.Button(
                icon_name="mdi-refresh",
                on_click=lambda: set_recordings(config_manager.list_recordings()),
                icon=True,
                small=True,
            )
        with solara.Row():
            solara.Button(
                icon_name="mdi-play",
                on_click=playback.play,
                icon=True,
                small=True,
                color="primary",
                disabled=playback.is_playing.value or playback.frame_count == 0,
            )
            solara.Button(
                icon_name="mdi-pause",
                on_click=playback.pause,
                icon=True,
                small=True,
                disabled=not playback.is_playing.value,
            )
            solara.Button(
                icon_name="mdi-skip-next",
                on_click=playback.step,
                icon=True,
                small=True,
                disabled=playback.is_playing.value or playback.finished,
            )
        solara.Text(
            f"Frame {playback.frame_index.value} / {playback.frame_count}",
            style="font-size: 0.85rem; color: #666;",
        )
        if error:
            solara.Error(error, dense=True)
