import copy
from typing import List, Dict, Any, Tuple
from ..schemas import ComponentMetadata, PlacedComponent, Port

import config

class BaseComponent:
    """Catalog entry for a component type that can be placed on the canvas"""
    COMPONENT_TYPE = "base"
    NAME = "Component"
    ICON = ""
    DESCRIPTION = "Base Component"
    CATEGORY = "Other"
    DEFAULT_WIDTH = config.DEFAULT_SIZE[0]
    DEFAULT_HEIGHT = config.DEFAULT_SIZE[1]
    DEFAULT_PROPS: Dict[str, Any] = {}
    # Workflow ports as (key, label); port ids become "<component id>-<key>"
    INPUTS: List[Tuple[str, str]] = [("input", "Input")]
    OUTPUTS: List[Tuple[str, str]] = [("output", "Output")]
    # Properties panel fields. Example: {"name": "text", "label": "Text", "kind": "text"}
    FIELDS: List[Dict[str, Any]] = []

    @classmethod
    def get_schema(cls) -> ComponentMetadata:
        return ComponentMetadata(
            type=cls.COMPONENT_TYPE,
            name=cls.NAME,
            icon=cls.ICON,
            description=cls.DESCRIPTION,
            category=cls.CATEGORY,
            defaultWidth=cls.DEFAULT_WIDTH,
            defaultHeight=cls.DEFAULT_HEIGHT,
            defaultProps=copy.deepcopy(cls.DEFAULT_PROPS),
            inputs=[label for _, label in cls.INPUTS],
            outputs=[label for _, label in cls.OUTPUTS],
        )

    @classmethod
    def create(cls, component_id: str) -> PlacedComponent:
        x, y = config.DEFAULT_POSITION
        return PlacedComponent(
            id=component_id,
            type=cls.COMPONENT_TYPE,
            name=cls.NAME,
            x=x,
            y=y,
            width=cls.DEFAULT_WIDTH or config.DEFAULT_SIZE[0],
            height=cls.DEFAULT_HEIGHT or config.DEFAULT_SIZE[1],
            # Catalog defaults must stay untouched by later edits
            props=copy.deepcopy(cls.DEFAULT_PROPS),
            events=[],
        )

    @classmethod
    def input_ports(cls, component_id: str) -> List[Port]:
        return [Port(id=f"{component_id}-{key}", name=label) for key, label in cls.INPUTS]

    @classmethod
    def output_ports(cls, component_id: str) -> List[Port]:
        return [Port(id=f"{component_id}-{key}", name=label) for key, label in cls.OUTPUTS]
