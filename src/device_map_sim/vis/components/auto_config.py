"""Sidebar controls generated from the MapConfig field metadata."""

from typing import Any, Dict, List, Tuple, Type

import solara
from pydantic import BaseModel

from device_map_sim.schemas import MapConfig
from device_map_sim.services import config_manager
from device_map_sim.vis.state.config import MapUIConfig, ui_config

PREFERRED_GROUP_ORDER = ["Projection", "Background", "Playback"]


def group_fields(schema: Type[BaseModel]) -> Dict[str, List[Tuple[str, dict]]]:
    """Group the schema's UI fields by `ui_group`, in display order.

    Fields without UI metadata (e.g. the config label) are left out.
    """
    groups: Dict[str, List[Tuple[str, dict]]] = {}
    for name, info in schema.model_fields.items():
        extra = info.json_schema_extra or {}
        if "ui_group" not in extra:
            continue
        groups.setdefault(extra["ui_group"], []).append((name, extra))

    ordered = sorted(
        groups,
        key=lambda g: (
            PREFERRED_GROUP_ORDER.index(g) if g in PREFERRED_GROUP_ORDER else 99
        ),
    )
    return {g: groups[g] for g in ordered}


def format_value(value: Any, fmt: str) -> str:
    """Text shown in an input for a field value."""
    if value is None:
        return ""
    if fmt == "list":
        return ", ".join(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def parse_value(text: str, annotation: Any, fmt: str) -> Any:
    """Inverse of `format_value`. Raises ValueError on unparseable numbers."""
    if fmt == "list":
        return [part.strip() for part in text.split(",") if part.strip()]
    if annotation is int:
        return int(text)
    if annotation is float:
        return float(text)
    return text.strip()


@solara.component
def MapConfigView(
    schema: Type[BaseModel] = MapConfig, model: MapUIConfig = ui_config
):
    """Editable map settings, one input per field, grouped like the schema."""
    configs, set_configs = solara.use_state(config_manager.list_configs())
    selected, set_selected = solara.use_state(None)
    error, set_error = solara.use_state(None)

    def load(filename):
        if not filename:
            return
        try:
            model.from_map_config(config_manager.load_config(filename))
            set_selected(filename)
            set_error(None)
        except (FileNotFoundError, ValueError) as e:
            set_error(str(e))

    def make_setter(target: solara.Reactive, annotation: Any, fmt: str):
        def _setter(text):
            try:
                target.value = parse_value(text or "", annotation, fmt)
            except ValueError:
                pass

        return _setter

    with solara.Column(classes=["sidebar-compact"], gap="0px"):
        solara.Markdown("**MAP SETTINGS**", style="font-size: 0.9rem; opacity: 0.7;")
        with solara.Row(style="align-items: center;"):
            solara.Select(
                label="Config",
                values=configs,
                value=selected,
                on_value=load,
            )
            solara.Button(
                icon_name="mdi-refresh",
                on_click=lambda: set_configs(config_manager.list_configs()),
                icon=True,
                small=True,
            )
            solara.Button(
                icon_name="mdi-restore",
                on_click=lambda: model.from_map_config(MapConfig()),
                icon=True,
                small=True,
            )

        for group_name, fields in group_fields(schema).items():
            solara.Markdown(
                f"**{group_name}**",
                style="font-size: 0.85rem; opacity: 0.6; margin-top: 12px; "
                "margin-bottom: 4px; text-transform: uppercase;",
            )
            for name, extra in fields:
                target = getattr(model, name)
                fmt = extra.get("ui_format", "float")
                annotation = schema.model_fields[name].annotation
                solara.InputText(
                    label=extra.get("ui_label", name),
                    value=format_value(target.value, fmt),
                    on_value=make_setter(target, annotation, fmt),
                    dense=True,
                )

        if error:
            solara.Error(error, dense=True)
