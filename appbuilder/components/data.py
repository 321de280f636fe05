from .base import BaseComponent

class TableComponent(BaseComponent):
    COMPONENT_TYPE = "table"
    NAME = "Table"
    ICON = "🗃️"
    DESCRIPTION = "A table for displaying structured data"
    CATEGORY = "Data Display"
    DEFAULT_WIDTH = 500
    DEFAULT_HEIGHT = 300
    DEFAULT_PROPS = {
        "columns": [
            {"field": "id", "header": "ID"},
            {"field": "name", "header": "Name"},
            {"field": "value", "header": "Value"},
        ],
        "data": [],
    }

class ChartComponent(BaseComponent):
    COMPONENT_TYPE = "chart"
    NAME = "Chart"
    ICON = "📊"
    DESCRIPTION = "A chart for data visualization"
    CATEGORY = "Data Display"
    DEFAULT_WIDTH = 400
    DEFAULT_HEIGHT = 300
    DEFAULT_PROPS = {
        "type": "bar",
        "data": {
            "labels": ["A", "B", "C"],
            "datasets": [{"data": [10, 20, 30]}],
        },
    }

class ListComponent(BaseComponent):
    COMPONENT_TYPE = "list"
    NAME = "List"
    ICON = "📋"
    DESCRIPTION = "A list of items"
    CATEGORY = "Data Display"
    DEFAULT_WIDTH = 300
    DEFAULT_HEIGHT = 200
    DEFAULT_PROPS = {"items": ["Item 1", "Item 2", "Item 3"], "type": "unordered"}
