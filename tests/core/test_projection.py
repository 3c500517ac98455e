"""Tests for the device map projection."""

import pytest
from pydantic import ValidationError

from device_map_sim.core.projection import (
    MalformedDeviceError,
    assign_colors,
    color_for_index,
    container_transform,
    describe_device,
    format_angle,
    project,
    round_half_up,
)
from device_map_sim.schemas import (
    Device,
    MapConfig,
    Orientation,
    Position,
    ViewState,
)
from device_map_sim.schemas.defaults import DEFAULT_PALETTE, ISOMETRIC_TRANSFORM


def test_single_device_scenario(device_factory) -> None:
    """A visible device at (1, 2, 0) lands at (100, 200), depth 0, first color."""
    d1 = device_factory(name="d1", x=1, y=2, z=0)

    render = project([d1], ViewState())

    assert len(render.sprites) == 1
    sprite = render.sprites[0]
    assert (sprite.left_px, sprite.top_px) == (100, 200)
    assert sprite.pos_z == 0
    assert sprite.color == DEFAULT_PALETTE[0]
    assert sprite.size == "30px"


def test_hidden_device_not_rendered(device_factory) -> None:
    d1 = device_factory(name="d1", x=1, y=2, visible=False)

    render = project([d1], ViewState())

    assert render.sprites == []
    assert render.skipped == []


def test_rendered_count_equals_visible_count(device_factory) -> None:
    devices = [
        device_factory(name=f"d{i}", x=i, visible=(i % 3 != 0)) for i in range(10)
    ]

    render = project(devices, ViewState())

    assert len(render.sprites) == sum(d.visible for d in devices)
    assert all(s.name != "d0" for s in render.sprites)


def test_colors_follow_index_among_visible(device_factory) -> None:
    """Hidden devices do not consume a palette slot."""
    devices = [
        device_factory(name="a"),
        device_factory(name="hidden", visible=False),
        device_factory(name="b"),
    ]

    render = project(devices, ViewState())

    assert [s.color for s in render.sprites] == ["red", "orange"]


def test_second_device_color_and_reversal(device_factory) -> None:
    """Colors belong to positions, not identities: reversing swaps them."""
    a = device_factory(name="a")
    b = device_factory(name="b", x=1)

    forward = project([a, b], ViewState())
    reverse = project([b, a], ViewState())

    palette = DEFAULT_PALETTE
    assert forward.sprites[1].color == palette[1 % len(palette)]
    assert {s.name: s.color for s in forward.sprites} == {"a": "red", "b": "orange"}
    assert {s.name: s.color for s in reverse.sprites} == {"b": "red", "a": "orange"}


def test_palette_wraps_around(device_factory) -> None:
    devices = [device_factory(name=f"d{i}") for i in range(9)]

    render = project(devices, ViewState())

    assert render.sprites[7].color == DEFAULT_PALETTE[0]
    assert render.sprites[8].color == DEFAULT_PALETTE[1]


def test_projection_is_deterministic(device_factory) -> None:
    devices = [device_factory(name=f"d{i}", x=i * 0.5, yaw=i * 10) for i in range(5)]

    assert project(devices, ViewState()) == project(devices, ViewState())


def test_duplicate_names_are_not_deduplicated(device_factory) -> None:
    devices = [device_factory(name="dup"), device_factory(name="dup", x=2)]

    render = project(devices, ViewState())

    assert [s.name for s in render.sprites] == ["dup", "dup"]
    assert [s.left_px for s in render.sprites] == [0, 200]


def test_orientation_passed_through(device_factory) -> None:
    d = device_factory(yaw=33.3, pitch=-12.0, roll=270.0)

    sprite = project([d], ViewState()).sprites[0]

    assert (sprite.yaw, sprite.pitch, sprite.roll) == (33.3, -12.0, 270.0)


def test_custom_scale(device_factory) -> None:
    d = device_factory(x=1.5, y=-2, z=0.25)

    sprite = project([d], ViewState(), MapConfig(scale=40)).sprites[0]

    assert (sprite.left_px, sprite.top_px, sprite.pos_z) == (60, -80, 10)


def test_malformed_device_skipped(device_factory) -> None:
    """A device without geometry is skipped but keeps its palette slot."""
    devices = [
        Device(name="no-geometry"),
        Device(name="no-orientation", position=Position(x=1, y=1)),
        device_factory(name="ok"),
    ]

    render = project(devices, ViewState())

    assert [s.name for s in render.sprites] == ["ok"]
    assert render.sprites[0].color == DEFAULT_PALETTE[2]
    assert render.skipped == ["no-geometry", "no-orientation"]


def test_malformed_device_keeps_later_colors_stable(device_factory) -> None:
    """A broken record ahead of a good one does not shift the good one's color."""
    render = project([Device(name="broken"), device_factory(name="b")], ViewState())

    assert [s.name for s in render.sprites] == ["b"]
    assert render.sprites[0].color == "orange"


def test_overflowing_position_is_skipped(device_factory) -> None:
    """A finite coordinate that overflows once scaled does not break the map."""
    devices = [device_factory(name="far", x=1e307), device_factory(name="ok", x=1)]

    render = project(devices, ViewState())

    assert [s.name for s in render.sprites] == ["ok"]
    assert render.skipped == ["far"]
    assert render.sprites[0].color == "orange"


def test_describe_device_rejects_overflow(device_factory) -> None:
    with pytest.raises(MalformedDeviceError, match="non-finite"):
        describe_device(device_factory(name="far", y=-1e307), MapConfig())


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_geometry_rejected_by_schema(value: float) -> None:
    with pytest.raises(ValidationError):
        Position(x=value)
    with pytest.raises(ValidationError):
        Orientation(yaw=value)


def test_hidden_malformed_device_is_not_reported() -> None:
    render = project([Device(name="ghost", visible=False)], ViewState())

    assert render.sprites == []
    assert render.skipped == []


# ── Container transform ─────────────────────────────────────────────────────


def test_flat_container_transform() -> None:
    container = container_transform(False, 0, MapConfig())

    assert container.transform == "none"
    assert container.top_px == 0
    assert container.pattern_class == "pattern0"


def test_isometric_container_transform() -> None:
    container = container_transform(True, 2, MapConfig())

    assert container.transform == ISOMETRIC_TRANSFORM
    assert "rotateX(60deg)" in container.transform
    assert "scale3d(0.8,0.8,0.8)" in container.transform
    assert container.top_px == 250
    assert container.pattern_class == "pattern2"


def test_container_transform_applies_once_regardless_of_devices(device_factory) -> None:
    devices = [device_factory(name=f"d{i}") for i in range(3)]

    iso = project(devices, ViewState(isometric=True))
    flat = project(devices, ViewState(isometric=False))

    # Sprite placement is independent of the projection mode
    assert iso.sprites == flat.sprites
    assert iso.container.transform != flat.container.transform


def test_pattern_index_wraps() -> None:
    assert container_transform(False, 4, MapConfig()).pattern_class == "pattern1"


# ── Accessible description ──────────────────────────────────────────────────


def test_describe_device(device_factory) -> None:
    d1 = device_factory(name="d1", x=1, y=2, z=0)

    assert describe_device(d1, MapConfig()) == (
        "d1 on Device Map, Position: 100, 200, 0, "
        "Orientation: yaw: 0, pitch: 0, roll: 0"
    )


def test_describe_device_rounds_position_keeps_raw_angles(device_factory) -> None:
    d = device_factory(name="phone", x=0.125, y=1.004, z=-0.125, yaw=45.5, roll=-90)

    label = describe_device(d, MapConfig())

    assert "Position: 13, 100, -12," in label
    assert "yaw: 45.5, pitch: 0, roll: -90" in label


def test_aria_label_attached_to_sprite(device_factory) -> None:
    d = device_factory(name="d1", x=1, y=2)

    sprite = project([d], ViewState()).sprites[0]

    assert sprite.aria_label == describe_device(d, MapConfig())


@pytest.mark.parametrize(
    "value,expected", [(12.5, 13), (-12.5, -12), (0.4, 0), (-0.6, -1), (7.0, 7)]
)
def test_round_half_up(value: float, expected: int) -> None:
    assert round_half_up(value) == expected


@pytest.mark.parametrize(
    "value,expected", [(0.0, "0"), (90.0, "90"), (-45.0, "-45"), (12.5, "12.5")]
)
def test_format_angle(value: float, expected: str) -> None:
    assert format_angle(value) == expected


# ── Color helpers ───────────────────────────────────────────────────────────


def test_color_for_index_custom_palette() -> None:
    config = MapConfig(palette=["black", "white"])

    assert [color_for_index(i, config) for i in range(5)] == [
        "black",
        "white",
        "black",
        "white",
        "black",
    ]


def test_assign_colors_matches_projection(device_factory) -> None:
    devices = [
        device_factory(name="a"),
        device_factory(name="b", visible=False),
        Device(name="broken"),
        device_factory(name="c"),
    ]

    colors = assign_colors(devices, MapConfig())
    render = project(devices, ViewState())

    assert colors == ["red", None, None, "yellow"]
    assert [c for c in colors if c] == [s.color for s in render.sprites]
