from .base import BaseComponent

class ContainerComponent(BaseComponent):
    COMPONENT_TYPE = "container"
    NAME = "Container"
    ICON = "📦"
    DESCRIPTION = "A container for other components"
    CATEGORY = "Layout"
    DEFAULT_WIDTH = 300
    DEFAULT_HEIGHT = 200
    DEFAULT_PROPS = {"padding": 16, "backgroundColor": "transparent", "border": "none"}
    FIELDS = [
        {"name": "padding", "label": "Padding", "kind": "number", "fallback": 0},
        {"name": "backgroundColor", "label": "Background Color", "kind": "text"},
        {"name": "border", "label": "Border", "kind": "text"},
    ]

class CardComponent(BaseComponent):
    COMPONENT_TYPE = "card"
    NAME = "Card"
    ICON = "🃏"
    DESCRIPTION = "A card component with header and content"
    CATEGORY = "Layout"
    DEFAULT_WIDTH = 300
    DEFAULT_HEIGHT = 200
    DEFAULT_PROPS = {"title": "Card Title", "shadow": True}
    FIELDS = [
        {"name": "title", "label": "Title", "kind": "text"},
        {"name": "shadow", "label": "Enable shadow", "kind": "checkbox"},
    ]

class GridComponent(BaseComponent):
    COMPONENT_TYPE = "grid"
    NAME = "Grid"
    ICON = "🔲"
    DESCRIPTION = "A grid layout for organizing components"
    CATEGORY = "Layout"
    DEFAULT_WIDTH = 400
    DEFAULT_HEIGHT = 300
    DEFAULT_PROPS = {"columns": 2, "gap": 16}
    FIELDS = [
        {"name": "columns", "label": "Columns", "kind": "number", "fallback": 2},
        {"name": "gap", "label": "Gap", "kind": "number", "fallback": 0},
    ]
