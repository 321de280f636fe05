import logging
from typing import Callable, List, Optional
from .geometry import Point, Rect, clamp
from .schemas import PlacedComponent

import config

logger = logging.getLogger(__name__)

class CanvasEditor:
    """
    Free-form layout surface for placed components.

    The canvas is driven by pointer events in client coordinates. `origin` is
    where the canvas element's top-left sits in client space. Component
    geometry is stored in canvas units; `scale` only affects how client
    coordinates map onto them.

    Like a controlled widget, the canvas never edits the component list
    itself: it reports selection and geometry changes through
    `on_select_component` and `on_update_component`, and the owner pushes the
    new `components` / `selected_component` back. Without callbacks it applies
    the changes to its own copies.
    """

    def __init__(
        self,
        components: Optional[List[PlacedComponent]] = None,
        selected_component: Optional[PlacedComponent] = None,
        on_select_component: Optional[Callable] = None,
        on_update_component: Optional[Callable] = None,
    ):
        self.components: List[PlacedComponent] = list(components or [])
        self.selected_component = selected_component
        self.on_select_component = on_select_component or self._apply_selection
        self.on_update_component = on_update_component or self._apply_update

        self.origin = Point(0, 0)
        self.scale = 1.0

        # Gesture state
        self.is_dragging = False
        self.drag_start = Point(0, 0)
        self.drag_offset = Point(0, 0)
        self.resize_handle: Optional[str] = None
        self.resize_start: Optional[Rect] = None

    def _apply_selection(self, component):
        self.selected_component = component

    def _apply_update(self, updated):
        self.components = [updated if c.id == updated.id else c for c in self.components]
        if self.selected_component and self.selected_component.id == updated.id:
            self.selected_component = updated

    # --- Coordinates ---

    def get_component(self, component_id: str) -> Optional[PlacedComponent]:
        return next((c for c in self.components if c.id == component_id), None)

    def client_rect(self, component: PlacedComponent) -> Rect:
        return Rect(
            self.origin.x + component.x * self.scale,
            self.origin.y + component.y * self.scale,
            component.width * self.scale,
            component.height * self.scale,
        )

    def to_canvas(self, client: Point) -> Point:
        return (client - self.origin).scale(1 / self.scale)

    def component_at(self, point: Point) -> Optional[PlacedComponent]:
        """Topmost component under a canvas-space point. Later components paint on top."""
        for component in reversed(self.components):
            if Rect(component.x, component.y, component.width, component.height).contains(point):
                return component
        return None

    def _is_selected(self, component: PlacedComponent) -> bool:
        return self.selected_component is not None and self.selected_component.id == component.id

    # --- Pointer events ---

    def pointer_down(self, component_id: str, client_x: float, client_y: float) -> bool:
        component = self.get_component(component_id)
        if not component:
            return False

        if not self._is_selected(component):
            self.on_select_component(component)

        pointer = Point(client_x, client_y)
        rect = self.client_rect(component)
        self.is_dragging = True
        self.drag_start = pointer
        self.drag_offset = pointer - Point(rect.x, rect.y)
        logger.debug(f"Drag start on {component_id} at {pointer}")
        return True

    def pointer_down_handle(self, component_id: str, handle: str, client_x: float, client_y: float) -> bool:
        # Handles are only drawn on the selected component
        selected = self.selected_component
        if not selected or selected.id != component_id or handle not in config.RESIZE_HANDLES:
            return False

        self.resize_handle = handle
        self.drag_start = Point(client_x, client_y)
        self.resize_start = Rect(selected.x, selected.y, selected.width, selected.height)
        logger.debug(f"Resize start on {selected.id} ({handle})")
        return True

    def pointer_move(self, client_x: float, client_y: float) -> Optional[PlacedComponent]:
        pointer = Point(client_x, client_y)

        if self.resize_handle and self.selected_component:
            return self._resize_to(pointer)

        if not self.is_dragging or not self.selected_component:
            return None

        if pointer.distance_to(self.drag_start) < config.DRAG_EPSILON:
            return None

        position = (pointer - self.origin - self.drag_offset).scale(1 / self.scale)
        updated = self.selected_component.model_copy(update={
            "x": max(0, position.x),
            "y": max(0, position.y),
        })
        self.on_update_component(updated)
        return updated

    def _resize_to(self, pointer: Point) -> PlacedComponent:
        delta = (pointer - self.drag_start).scale(1 / self.scale)
        start = self.resize_start
        minimum = config.MIN_COMPONENT_SIZE
        left, top, right, bottom = start.x, start.y, start.right, start.bottom

        if "e" in self.resize_handle:
            right = max(start.right + delta.x, left + minimum)
        if "w" in self.resize_handle:
            left = clamp(start.x + delta.x, 0, right - minimum)
        if "s" in self.resize_handle:
            bottom = max(start.bottom + delta.y, top + minimum)
        if "n" in self.resize_handle:
            top = clamp(start.y + delta.y, 0, bottom - minimum)

        updated = self.selected_component.model_copy(update={
            "x": left,
            "y": top,
            "width": right - left,
            "height": bottom - top,
        })
        self.on_update_component(updated)
        return updated

    def pointer_up(self):
        if self.is_dragging or self.resize_handle:
            logger.debug("Gesture end")
        self.is_dragging = False
        self.resize_handle = None
        self.resize_start = None

    def click(self, client_x: float, client_y: float) -> Optional[PlacedComponent]:
        hit = self.component_at(self.to_canvas(Point(client_x, client_y)))
        self.on_select_component(hit)
        return hit

    # --- Zoom ---

    def set_scale(self, value: float) -> float:
        # Two decimals keeps repeated steps on the 0.1 grid
        self.scale = round(clamp(value, config.MIN_SCALE, config.MAX_SCALE), 2)
        return self.scale

    def wheel(self, delta_y: float, ctrl_key: bool) -> bool:
        """Ctrl+wheel zooms. Returns True when the event was consumed."""
        if not ctrl_key:
            return False
        step = -config.SCALE_STEP if delta_y > 0 else config.SCALE_STEP
        self.set_scale(self.scale + step)
        return True

    def zoom_in(self) -> float:
        return self.set_scale(self.scale + config.SCALE_STEP)

    def zoom_out(self) -> float:
        return self.set_scale(self.scale - config.SCALE_STEP)

    @property
    def zoom_label(self) -> str:
        return f"{round(self.scale * 100)}%"

    # --- Rendering ---

    def view(self):
        items = []
        for component in self.components:
            selected = self._is_selected(component)
            items.append({
                "component": component.model_dump(),
                "selected": selected,
                "handles": list(config.RESIZE_HANDLES) if selected else [],
            })
        return {
            "scale": self.scale,
            "zoom": self.zoom_label,
            "grid_size": config.GRID_SIZE * self.scale,
            "is_dragging": self.is_dragging,
            "resizing": self.resize_handle,
            "components": items,
        }

    def unmount(self):
        """Drops any gesture in progress, as the window listeners go away."""
        self.pointer_up()
