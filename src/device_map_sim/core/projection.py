"""Projection of the device collection onto the map.

`project` is a pure function of (devices, view state, config). It performs
no I/O beyond logging and never raises for bad device records: a device
without geometry is skipped so that one bad record cannot blank the map.
"""

import logging
import math

from device_map_sim.schemas import (
    ContainerTransform,
    Device,
    DeviceCollection,
    MapConfig,
    RenderDescription,
    SpriteDescriptor,
    ViewState,
)
from device_map_sim.schemas.defaults import (
    FLAT_TOP_PX,
    FLAT_TRANSFORM,
    ISOMETRIC_TRANSFORM,
)

logger = logging.getLogger(__name__)


class MalformedDeviceError(ValueError):
    """A device record cannot be placed: missing or non-finite geometry."""


def round_half_up(value: float) -> int:
    """Round like the browser does (0.5 -> 1, -0.5 -> 0), not banker's rounding."""
    return math.floor(value + 0.5)


def format_angle(value: float) -> str:
    """Format an angle for display: 90.0 -> '90', 12.5 -> '12.5'."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def container_transform(
    isometric: bool, pattern_index: int, config: MapConfig
) -> ContainerTransform:
    """Build the single global transform for the drop-zone container."""
    pattern_class = f"pattern{pattern_index % config.pattern_count}"
    if isometric:
        return ContainerTransform(
            transform=ISOMETRIC_TRANSFORM,
            top_px=config.isometric_top_px,
            pattern_class=pattern_class,
        )
    return ContainerTransform(
        transform=FLAT_TRANSFORM, top_px=FLAT_TOP_PX, pattern_class=pattern_class
    )


def color_for_index(index: int, config: MapConfig) -> str:
    """Palette color for the index-th visible device."""
    return config.palette[index % len(config.palette)]


def assign_colors(devices: DeviceCollection, config: MapConfig) -> list[str | None]:
    """Colors aligned with `devices`; None for devices that are not drawn.

    Every visible device takes a palette slot, drawn or not, so the colors
    here match the sprites `project` produces.
    """
    colors: list[str | None] = []
    visible_idx = 0
    for device in devices:
        if not device.visible:
            colors.append(None)
            continue
        try:
            _require_geometry(device, config)
            colors.append(color_for_index(visible_idx, config))
        except MalformedDeviceError:
            colors.append(None)
        visible_idx += 1
    return colors


def _require_geometry(device: Device, config: MapConfig) -> None:
    """Raise MalformedDeviceError unless the device can be placed on screen."""
    if device.position is None or device.orientation is None:
        missing = [
            field
            for field in ("position", "orientation")
            if getattr(device, field) is None
        ]
        raise MalformedDeviceError(
            f"Device '{device.name}' is missing {', '.join(missing)}"
        )

    pos = device.position
    ori = device.orientation
    # Scaling can overflow to inf even when the raw coordinate is finite
    values = (
        config.scale * pos.x,
        config.scale * pos.y,
        config.scale * pos.z,
        ori.yaw,
        ori.pitch,
        ori.roll,
    )
    if not all(math.isfinite(v) for v in values):
        raise MalformedDeviceError(
            f"Device '{device.name}' has a non-finite screen position or angle"
        )


def describe_device(device: Device, config: MapConfig) -> str:
    """Accessible description of a device's screen position and orientation."""
    _require_geometry(device, config)
    pos = device.position
    ori = device.orientation
    return (
        f"{device.name} on Device Map, "
        f"Position: {round_half_up(config.scale * pos.x)}, "
        f"{round_half_up(config.scale * pos.y)}, "
        f"{round_half_up(config.scale * pos.z)}, "
        f"Orientation: yaw: {format_angle(ori.yaw)}, "
        f"pitch: {format_angle(ori.pitch)}, "
        f"roll: {format_angle(ori.roll)}"
    )


def project_device(device: Device, index: int, config: MapConfig) -> SpriteDescriptor:
    """Map one device to its sprite.

    Raises:
        MalformedDeviceError: If the device has no position or orientation,
            or a value that is not finite once scaled.
    """
    _require_geometry(device, config)
    pos = device.position
    ori = device.orientation
    return SpriteDescriptor(
        name=device.name,
        color=color_for_index(index, config),
        size=config.sprite_size,
        left_px=config.scale * pos.x,
        top_px=config.scale * pos.y,
        pos_z=config.scale * pos.z,
        yaw=ori.yaw,
        pitch=ori.pitch,
        roll=ori.roll,
        aria_label=describe_device(device, config),
    )


def project(
    devices: DeviceCollection,
    view_state: ViewState,
    config: MapConfig | None = None,
) -> RenderDescription:
    """Project the device collection into a render description.

    Hidden devices produce nothing. Colors follow the index among visible
    devices, so the same device can change color when others appear or
    disappear ahead of it. A malformed visible device is skipped but still
    takes its palette slot.
    """
    config = config or MapConfig()
    sprites: list[SpriteDescriptor] = []
    skipped: list[str] = []

    visible_idx = 0
    for device in devices:
        if not device.visible:
            continue
        try:
            sprites.append(project_device(device, visible_idx, config))
        except MalformedDeviceError as e:
            logger.warning(f"Skipping device: {e}")
            skipped.append(device.name)
        visible_idx += 1

    return RenderDescription(
        container=container_transform(
            view_state.isometric, view_state.pattern_index, config
        ),
        sprites=sprites,
        skipped=skipped,
    )
