"""Render description schemas.

A RenderDescription is everything the rendering engine needs to draw one
frame of the map. It is produced by `core.projection.project` and carries
no references back to the devices it was built from.
"""

from pydantic import BaseModel, ConfigDict, Field


class ContainerTransform(BaseModel):
    """Global transform applied once to the map drop-zone container."""

    transform: str = Field(..., description="CSS transform value")
    top_px: int = Field(..., description="Vertical offset of the container")
    pattern_class: str = Field(..., description="Background pattern CSS class")

    model_config = ConfigDict(frozen=True)


class SpriteDescriptor(BaseModel):
    """One positioned, colored and oriented device sprite."""

    name: str
    color: str
    size: str
    left_px: float = Field(..., description="scale * position.x")
    top_px: float = Field(..., description="scale * position.y")
    pos_z: float = Field(..., description="scale * position.z (sprite depth)")
    yaw: float
    pitch: float
    roll: float
    aria_label: str = Field(..., description="Accessible position/orientation text")

    model_config = ConfigDict(frozen=True)


class RenderDescription(BaseModel):
    """Declarative output of one map render."""

    container: ContainerTransform
    sprites: list[SpriteDescriptor] = Field(default_factory=list)
    skipped: list[str] = Field(
        default_factory=list, description="Names of malformed devices left out"
    )

    model_config = ConfigDict(frozen=True)
