import re
from typing import Any, List
from .component_library import library
from .schemas import PlacedComponent, PropertyField

import config

LAYOUT_FIELDS = ("x", "y", "width", "height")

def _parse_int(value: Any, fallback: int) -> int:
    # Leading-integer parse: "42px" -> 42, "abc" -> fallback, zero -> fallback
    if isinstance(value, bool):
        return fallback
    if isinstance(value, (int, float)):
        return int(value) or fallback

    match = re.match(r"\s*([+-]?\d+)", str(value))
    if not match:
        return fallback
    return int(match.group(1)) or fallback

def property_fields(component: PlacedComponent) -> List[PropertyField]:
    cls = library.definition_for(component.type)
    fields = []
    for entry in cls.FIELDS:
        fields.append(PropertyField(
            name=entry["name"],
            label=entry["label"],
            kind=entry["kind"],
            options=entry.get("options", []),
            value=component.props.get(entry["name"], cls.DEFAULT_PROPS.get(entry["name"])),
        ))
    return fields

def update_property(component: PlacedComponent, name: str, value: Any) -> PlacedComponent:
    cls = library.definition_for(component.type)
    entry = next((f for f in cls.FIELDS if f["name"] == name), None)
    if entry and entry["kind"] == "number":
        value = _parse_int(value, entry.get("fallback", 0))
    elif entry and entry["kind"] == "checkbox":
        value = bool(value)

    return component.model_copy(update={"props": {**component.props, name: value}})

def update_layout(component: PlacedComponent, field: str, value: Any) -> PlacedComponent:
    if field not in LAYOUT_FIELDS:
        raise ValueError(f"Unknown layout field: {field}")

    number = _parse_int(value, 0)
    if field in ("x", "y"):
        number = max(0, number)
    else:
        number = max(config.MIN_COMPONENT_SIZE, number)
    return component.model_copy(update={field: number})
