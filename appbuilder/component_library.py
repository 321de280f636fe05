import logging
import time
from typing import Dict, Type, List, Optional
from .components.base import BaseComponent
from .components.basic import ButtonComponent, TextComponent, InputComponent, ImageComponent
from .components.layout import ContainerComponent, CardComponent, GridComponent
from .components.data import TableComponent, ChartComponent, ListComponent
from .components.ai import ChatbotComponent, TextGeneratorComponent, KnowledgeSearchComponent
from .schemas import ComponentCategory, PlacedComponent

logger = logging.getLogger(__name__)

class ComponentLibrary:
    def __init__(self):
        self.component_classes: Dict[str, Type[BaseComponent]] = {}

        # Explicit registration, in palette order
        self.register(ButtonComponent)
        self.register(TextComponent)
        self.register(InputComponent)
        self.register(ImageComponent)
        # Layout
        self.register(ContainerComponent)
        self.register(CardComponent)
        self.register(GridComponent)
        # Data Display
        self.register(TableComponent)
        self.register(ChartComponent)
        self.register(ListComponent)
        # AI Components
        self.register(ChatbotComponent)
        self.register(TextGeneratorComponent)
        self.register(KnowledgeSearchComponent)

    def register(self, cls):
        if hasattr(cls, "COMPONENT_TYPE"):
            self.component_classes[cls.COMPONENT_TYPE] = cls

    def get_definition(self, component_type: str) -> Optional[Type[BaseComponent]]:
        return self.component_classes.get(component_type)

    def definition_for(self, component_type: str) -> Type[BaseComponent]:
        """Like get_definition, but falls back to the generic entry for unknown types."""
        return self.component_classes.get(component_type, BaseComponent)

    def get_all_metadata(self):
        return [cls.get_schema() for cls in self.component_classes.values()]

    def get_categories(self, query: str = "") -> List[ComponentCategory]:
        query = query.lower()
        categories: Dict[str, ComponentCategory] = {}
        for cls in self.component_classes.values():
            if cls.CATEGORY not in categories:
                categories[cls.CATEGORY] = ComponentCategory(name=cls.CATEGORY, components=[])
            if query in cls.NAME.lower() or query in cls.DESCRIPTION.lower():
                categories[cls.CATEGORY].components.append(cls.get_schema())

        return [category for category in categories.values() if category.components]

    def create_component(self, component_type: str, component_id: Optional[str] = None) -> PlacedComponent:
        cls = self.get_definition(component_type)
        if not cls:
            raise ValueError(f"Unknown component type: {component_type}")

        component_id = component_id or f"component-{int(time.time() * 1000)}"
        component = cls.create(component_id)
        logger.info(f"Created component {component.name} (ID: {component.id})")
        return component

library = ComponentLibrary()
