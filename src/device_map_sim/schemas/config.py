"""Configuration schemas for the device map."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from device_map_sim.schemas.defaults import (
    DEFAULT_ISOMETRIC_TOP_PX,
    DEFAULT_MAP_SCALE,
    DEFAULT_PALETTE,
    DEFAULT_PATTERN_COUNT,
    DEFAULT_PLAYBACK_INTERVAL,
    DEFAULT_SPRITE_SIZE,
)

# ---------------------------------------------------------------------------
# UI metadata helpers — attached to each Field via json_schema_extra.
# Keys:
#   ui_group  – sidebar card heading
#   ui_label  – human-readable control label
#   ui_format – rendering hint (int | float | px | list)
# ---------------------------------------------------------------------------


def _ui(group: str, label: str, fmt: str = "float") -> dict:
    """Build json_schema_extra dict for a config field."""
    return {"ui_group": group, "ui_label": label, "ui_format": fmt}


class MapConfig(BaseModel):
    """Presentation settings for the device map.

    None of these affect the simulation itself: they control how device
    coordinates are scaled, which palette sprites are drawn with, and how
    many background patterns the "cycle background" trigger rotates through.
    """

    name: str = Field("Default", description="Config label")
    scale: float = Field(
        DEFAULT_MAP_SCALE,
        gt=0,
        description="Screen pixels per simulation unit",
        json_schema_extra=_ui("Projection", "Scale (px/unit)", "float"),
    )
    palette: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PALETTE),
        min_length=1,
        description="Sprite colors, assigned by index among visible devices",
        json_schema_extra=_ui("Projection", "Palette", "list"),
    )
    sprite_size: str = Field(
        DEFAULT_SPRITE_SIZE,
        description="CSS size of each cube sprite",
        json_schema_extra=_ui("Projection", "Sprite Size", "px"),
    )
    pattern_count: int = Field(
        DEFAULT_PATTERN_COUNT,
        ge=1,
        description="Number of background patterns to cycle through",
        json_schema_extra=_ui("Background", "Patterns", "int"),
    )
    isometric_top_px: int = Field(
        DEFAULT_ISOMETRIC_TOP_PX,
        ge=0,
        description="Vertical offset of the map container in isometric mode",
        json_schema_extra=_ui("Projection", "Isometric Offset", "px"),
    )
    playback_interval: float = Field(
        DEFAULT_PLAYBACK_INTERVAL,
        gt=0,
        description="Seconds between recorded frames during playback",
        json_schema_extra=_ui("Playback", "Frame Interval (s)", "float"),
    )

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    @field_validator("palette")
    @classmethod
    def _no_blank_colors(cls, v: list[str]) -> list[str]:
        if any(not c.strip() for c in v):
            raise ValueError("palette entries must be non-empty color names")
        return v


class ViewState(BaseModel):
    """Presentation toggles owned by a single map view."""

    pattern_index: int = Field(0, ge=0, description="Background pattern selector")
    isometric: bool = Field(False, description="Isometric projection enabled")

    model_config = ConfigDict(frozen=True)
