"""Device map components: the drop-zone, its cube sprites and the toggles."""

from html import escape

import solara

from device_map_sim.schemas import ContainerTransform, MapConfig, SpriteDescriptor
from device_map_sim.services import (
    CYCLE_BACKGROUND,
    TOGGLE_ISOMETRIC,
    event_bus,
    simulation_state,
)
from device_map_sim.vis.state.config import ui_config
from device_map_sim.vis.state.view import DeviceMapView

DROPZONE_ATTRIBUTES = {"role": "widget", "tabindex": "0", "aria-label": "Device map"}


def dropzone_classes(container: ContainerTransform) -> list[str]:
    return ["dropzone", "box", container.pattern_class]


def dropzone_style(container: ContainerTransform) -> str:
    """Inline style for the drop-zone carrying the global projection."""
    return f"transform: {container.transform}; top: {container.top_px}px;"


def sprite_transform(sprite: SpriteDescriptor) -> str:
    """CSS transform for one cube: depth first, then yaw / pitch / roll."""
    return (
        f"translateZ({sprite.pos_z:g}px) "
        f"rotateZ({sprite.yaw:g}deg) "
        f"rotateX({sprite.pitch:g}deg) "
        f"rotateY({sprite.roll:g}deg)"
    )


def sprite_markup(sprite: SpriteDescriptor) -> str:
    """HTML for one absolutely positioned cube sprite."""
    return (
        f'<div class="device-dragzone" '
        f'style="position: absolute; left: {sprite.left_px:g}px; '
        f'top: {sprite.top_px:g}px;">'
        f'<div class="cube-sprite" id="{escape(sprite.name)}" role="widget" '
        f'tabindex="1" aria-live="polite" '
        f'aria-label="{escape(sprite.aria_label)}" '
        f'style="width: {sprite.size}; height: {sprite.size}; '
        f"background-color: {sprite.color}; "
        f'transform: {sprite_transform(sprite)};"></div>'
        f"</div>"
    )


@solara.component
def CubeSprite(sprite: SpriteDescriptor):
    """One absolutely positioned cube in the drop-zone."""
    return solara.HTML(
        tag="div", classes=["cube-sprite-host"], unsafe_innerHTML=sprite_markup(sprite)
    )


@solara.component
def DeviceMap(config: MapConfig | None = None):
    """Map of all visible devices, kept in sync with the simulation state.

    The view registers with the registry when the component mounts and
    leaves it again on unmount. Without an explicit config the map follows
    the sidebar settings.
    """
    view = solara.use_memo(
        lambda: DeviceMapView(simulation_state, event_bus, config), dependencies=[]
    )

    def lifecycle():
        view.activate()
        return view.deactivate

    solara.use_effect(lifecycle, [view])

    view.config = config or ui_config.to_map_config()
    # Touch the reactives so this component re-renders on every change
    _ = view.revision.value, view.devices.value, view.view_state.value
    render = view.render()

    with solara.Column(classes=["device-map"]):
        with solara.v.Html(
            tag="div",
            class_=" ".join(dropzone_classes(render.container)),
            style_=dropzone_style(render.container),
            attributes=DROPZONE_ATTRIBUTES,
        ):
            for sprite in render.sprites:
                CubeSprite(sprite)
        if render.skipped:
            solara.Warning(
                f"{len(render.skipped)} device(s) without a usable position or "
                f"orientation not shown: {', '.join(render.skipped)}",
                dense=True,
            )


@solara.component
def MapControls():
    """Buttons that broadcast the map trigger signals to every mounted map."""
    with solara.Row(style="align-items: center;"):
        solara.Button(
            "Change Map",
            icon_name="mdi-texture-box",
            on_click=lambda: event_bus.emit(CYCLE_BACKGROUND),
            small=True,
            text=True,
        )
        solara.Button(
            "Isometric View",
            icon_name="mdi-axis-arrow",
            on_click=lambda: event_bus.emit(TOGGLE_ISOMETRIC),
            small=True,
            text=True,
        )
