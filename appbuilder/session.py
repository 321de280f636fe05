import logging
import random
import time
from typing import Callable, List, Optional
from .canvas import CanvasEditor
from .component_library import library
from .schemas import AppDocument, PlacedComponent
from .workflow import WorkflowEditor

logger = logging.getLogger(__name__)

TABS = ("canvas", "workflow", "preview")

class BuilderSession:
    """
    One app being edited: the component list, the selection, and the editors
    looking at them. Editors report changes back through callbacks and the
    session pushes the new list and selection down to them.
    """

    def __init__(
        self,
        app_name: str = "Untitled App",
        components: Optional[List[PlacedComponent]] = None,
        on_event: Optional[Callable] = None,
        rng: Optional[random.Random] = None,
    ):
        self.app_name = app_name
        self.components: List[PlacedComponent] = list(components or [])
        self.selected_component: Optional[PlacedComponent] = None
        self.current_tab = "canvas"
        self.on_event = on_event
        self.rng = rng
        self._last_stamp = 0

        self.canvas = CanvasEditor(
            on_select_component=self.select_component,
            on_update_component=self.update_component,
        )
        self.workflow: Optional[WorkflowEditor] = None
        self._sync()

    @classmethod
    def from_document(cls, document: AppDocument, **kwargs) -> "BuilderSession":
        return cls(app_name=document.name, components=document.components, **kwargs)

    def to_document(self) -> AppDocument:
        return AppDocument(name=self.app_name, components=self.components)

    def _emit(self, event, payload):
        if self.on_event:
            try:
                self.on_event(event, payload)
            except Exception as e:
                logger.error(f"Event callback error: {e}")

    def _sync(self):
        self.canvas.components = self.components
        self.canvas.selected_component = self.selected_component
        if self.workflow:
            self.workflow.components = self.components

    def _next_component_id(self) -> str:
        stamp = int(time.time() * 1000)
        if stamp <= self._last_stamp:
            stamp = self._last_stamp + 1
        self._last_stamp = stamp
        return f"component-{stamp}"

    def get_component(self, component_id: str) -> Optional[PlacedComponent]:
        return next((c for c in self.components if c.id == component_id), None)

    def add_component(self, component_type: str) -> PlacedComponent:
        component = library.create_component(component_type, self._next_component_id())
        self.components = [*self.components, component]
        self.selected_component = component
        self._sync()
        logger.info(f"{component.name} has been added to the canvas")
        self._emit("component_added", component.model_dump())
        return component

    def select_component(self, component: Optional[PlacedComponent]):
        self.selected_component = component
        self._sync()
        self._emit("selection_changed", {"id": component.id if component else None})

    def update_component(self, updated: PlacedComponent):
        self.components = [updated if c.id == updated.id else c for c in self.components]
        if self.selected_component and self.selected_component.id == updated.id:
            self.selected_component = updated
        self._sync()
        self._emit("component_updated", updated.model_dump())

    def delete_component(self, component_id: str):
        self.components = [c for c in self.components if c.id != component_id]
        self.selected_component = None
        self._sync()
        logger.info(f"Component {component_id} has been removed from the canvas")
        self._emit("component_deleted", {"id": component_id})

    def set_tab(self, name: str):
        if name not in TABS:
            raise ValueError(f"Unknown tab: {name}")
        if name == self.current_tab:
            return

        if self.current_tab == "canvas":
            self.canvas.unmount()
        elif self.current_tab == "workflow" and self.workflow:
            self.workflow.unmount()
            self.workflow = None

        if name == "workflow":
            self.workflow = WorkflowEditor(self.components, rng=self.rng, on_event=self._emit)

        self.current_tab = name
        logger.info(f"Switched to tab: {name}")

    def state(self):
        return {
            "name": self.app_name,
            "tab": self.current_tab,
            "selected": self.selected_component.id if self.selected_component else None,
            "components": [c.model_dump() for c in self.components],
        }
