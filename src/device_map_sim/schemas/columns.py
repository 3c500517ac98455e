"""Strongly typed column names for device table DataFrames.

Defines the data contract between the device schema and the device table.
"""


class ColumnNames:
    """Column name constants for the flattened device rows."""

    NAME = "name"
    DEVICE_TYPE = "device_type"
    VISIBLE = "visible"
    X = "x"
    Y = "y"
    Z = "z"
    YAW = "yaw"
    PITCH = "pitch"
    ROLL = "roll"
    COLOR = "color"


DEVICE_TABLE_COLUMNS = [
    ColumnNames.NAME,
    ColumnNames.DEVICE_TYPE,
    ColumnNames.VISIBLE,
    ColumnNames.X,
    ColumnNames.Y,
    ColumnNames.Z,
    ColumnNames.YAW,
    ColumnNames.PITCH,
    ColumnNames.ROLL,
    ColumnNames.COLOR,
]
