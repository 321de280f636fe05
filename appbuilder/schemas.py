from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Dict, Any, Optional

import config

COMPONENT_TYPES = (
    "button", "text", "input", "image",
    "container", "card", "grid",
    "table", "chart", "list",
    "chatbot", "textGenerator", "knowledgeSearch",
)

class PlacedComponent(BaseModel):
    id: str
    type: str
    name: str = ""
    x: float = Field(0, ge=0)
    y: float = Field(0, ge=0)
    width: float = Field(config.DEFAULT_SIZE[0], ge=config.MIN_COMPONENT_SIZE)
    height: float = Field(config.DEFAULT_SIZE[1], ge=config.MIN_COMPONENT_SIZE)
    props: Dict[str, Any] = {}
    events: List[Dict[str, Any]] = []

    @field_validator("type")
    @classmethod
    def known_type(cls, value):
        if value not in COMPONENT_TYPES:
            raise ValueError(f"Unknown component type: {value}")
        return value

    def model_post_init(self, __context):
        if not self.name:
            self.name = self.type

class Port(BaseModel):
    id: str
    name: str

class WorkflowNode(BaseModel):
    id: str
    name: str
    type: str
    inputs: List[Port]
    outputs: List[Port]
    position: Dict[str, float]

class Connection(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    from_: str = Field(alias="from")
    fromPort: str
    to: str
    toPort: str

class ComponentMetadata(BaseModel):
    type: str
    name: str
    icon: str
    description: str
    category: str
    defaultWidth: float
    defaultHeight: float
    defaultProps: Dict[str, Any]
    inputs: List[str]
    outputs: List[str]

class ComponentCategory(BaseModel):
    name: str
    components: List[ComponentMetadata]

class PropertyField(BaseModel):
    name: str
    label: str
    kind: str # text, textarea, select, number, checkbox
    options: List[str] = []
    value: Any = None

class AppDocument(BaseModel):
    name: str = "Untitled App"
    components: List[PlacedComponent] = []

# --- Request bodies ---

class CreateApp(BaseModel):
    name: str = "Untitled App"

class AddComponent(BaseModel):
    type: str

class SelectComponent(BaseModel):
    component_id: Optional[str] = None

class PropertyChange(BaseModel):
    property: str
    value: Any = None

class TabChange(BaseModel):
    name: str

class ClientPoint(BaseModel):
    client_x: float
    client_y: float

class CanvasPointerDown(ClientPoint):
    component_id: str
    handle: Optional[str] = None

class WheelEvent(BaseModel):
    delta_y: float
    ctrl_key: bool = False

class ZoomChange(BaseModel):
    direction: str # "in" or "out"

class PortEvent(BaseModel):
    node_id: str
    port_id: str
    is_output: bool

class SelectNode(BaseModel):
    node_id: Optional[str] = None

class SaveApp(BaseModel):
    name: Optional[str] = None
