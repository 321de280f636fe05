import logging
import random
import time
from typing import Callable, Dict, List, Optional, Tuple
from .component_library import library
from .geometry import Point, bezier_path, midpoint
from .schemas import Connection, PlacedComponent, Port, WorkflowNode

import config

logger = logging.getLogger(__name__)

def synthesize_ports(component: PlacedComponent) -> Tuple[List[Port], List[Port]]:
    """Input and output ports for a component. Depends only on its type and id."""
    cls = library.definition_for(component.type)
    return cls.input_ports(component.id), cls.output_ports(component.id)

class WorkflowEditor:
    """
    Node-link view of the placed components.

    One instance lives for one mount of the workflow view. Node positions are
    seeded when a node is first seen and kept until unmount; connections and
    node selection are never written back to the components.

    Creating a connection is a two-phase gesture: `port_down` on an output port
    arms it, `pointer_move` tracks the pending line, and `port_up` on an input
    port of another node commits it. Any other release cancels.
    """

    def __init__(
        self,
        components: Optional[List[PlacedComponent]] = None,
        rng: Optional[random.Random] = None,
        layout_mode: Optional[str] = None,
        on_event: Optional[Callable] = None,
    ):
        self.components: List[PlacedComponent] = list(components or [])
        self.rng = rng or random.Random()
        self.layout_mode = layout_mode or config.LAYOUT_MODE
        self.on_event = on_event

        self.origin = Point(0, 0)
        self.positions: Dict[str, Dict[str, float]] = {}
        self.connections: List[Connection] = []
        self.selected_node_id: Optional[str] = None
        self.panel: Optional[dict] = None

        # Armed state
        self.is_creating_connection = False
        self.connection_start: Optional[Dict[str, str]] = None
        self.pointer: Optional[Point] = None

        self._last_stamp = 0

    def _emit(self, event, payload):
        if self.on_event:
            try:
                self.on_event(event, payload)
            except Exception as e:
                logger.error(f"Event callback error: {e}")

    # --- Nodes ---

    def _position_for(self, component: PlacedComponent) -> Dict[str, float]:
        if self.layout_mode == "canvas":
            return {"x": component.x, "y": component.y}

        if component.id not in self.positions:
            base_x, base_y = config.LAYOUT_ORIGIN
            spread_x, spread_y = config.LAYOUT_SPREAD
            self.positions[component.id] = {
                "x": base_x + self.rng.random() * spread_x,
                "y": base_y + self.rng.random() * spread_y,
            }
        return self.positions[component.id]

    def nodes(self) -> List[WorkflowNode]:
        nodes = []
        for component in self.components:
            inputs, outputs = synthesize_ports(component)
            nodes.append(WorkflowNode(
                id=component.id,
                name=component.name or component.type,
                type=component.type,
                inputs=inputs,
                outputs=outputs,
                position=self._position_for(component),
            ))
        return nodes

    def get_node(self, node_id: str) -> Optional[WorkflowNode]:
        return next((n for n in self.nodes() if n.id == node_id), None)

    @staticmethod
    def port_position(node: WorkflowNode, port_id: str, is_output: bool) -> Optional[Point]:
        ports = node.outputs if is_output else node.inputs
        index = next((i for i, port in enumerate(ports) if port.id == port_id), None)
        if index is None:
            return None

        x = node.position["x"] + (config.NODE_WIDTH if is_output else 0)
        y = node.position["y"] + config.PORT_OFFSET_Y + index * config.PORT_SPACING
        return Point(x, y)

    # --- Connection gesture ---

    def port_down(self, node_id: str, port_id: str, is_output: bool) -> bool:
        if not is_output:
            return False

        node = self.get_node(node_id)
        if not node or not any(port.id == port_id for port in node.outputs):
            return False

        self.is_creating_connection = True
        self.connection_start = {"nodeId": node_id, "portId": port_id}
        self.pointer = None
        logger.debug(f"Connection armed from {node_id}:{port_id}")
        return True

    def pointer_move(self, client_x: float, client_y: float) -> Optional[dict]:
        if not self.is_creating_connection:
            return None
        self.pointer = Point(client_x, client_y) - self.origin
        return self.pending_line()

    def port_up(self, node_id: str, port_id: str, is_output: bool) -> Optional[Connection]:
        if not self.is_creating_connection or not self.connection_start:
            return None

        start = self.connection_start
        created = None

        # No self-loops
        if not is_output and start["nodeId"] != node_id:
            node = self.get_node(node_id)
            if node and any(port.id == port_id for port in node.inputs):
                created = Connection(
                    id=self._next_connection_id(),
                    from_=start["nodeId"],
                    fromPort=start["portId"],
                    to=node_id,
                    toPort=port_id,
                )
                self.connections = [*self.connections, created]
                logger.info(f"Connected {created.from_}:{created.fromPort} -> {created.to}:{created.toPort}")
                self._emit("connection_created", created.model_dump(by_alias=True))

        self._disarm()
        return created

    def pointer_up(self):
        """Release over the background: cancels an armed connection."""
        if self.is_creating_connection:
            logger.debug("Connection cancelled")
        self._disarm()

    def _disarm(self):
        self.is_creating_connection = False
        self.connection_start = None
        self.pointer = None

    def _next_connection_id(self) -> str:
        stamp = int(time.time() * 1000)
        if stamp <= self._last_stamp:
            stamp = self._last_stamp + 1
        self._last_stamp = stamp
        return f"connection-{stamp}"

    def pending_line(self) -> Optional[dict]:
        if not self.is_creating_connection or not self.connection_start:
            return None

        node = self.get_node(self.connection_start["nodeId"])
        start = node and self.port_position(node, self.connection_start["portId"], True)
        if not start:
            return None

        end = self.pointer or start
        return {"x1": start.x, "y1": start.y, "x2": end.x, "y2": end.y}

    # --- Connections ---

    def delete_connection(self, connection_id: str) -> bool:
        remaining = [c for c in self.connections if c.id != connection_id]
        removed = len(remaining) != len(self.connections)
        self.connections = remaining
        if removed:
            logger.info(f"Deleted connection {connection_id}")
            self._emit("connection_deleted", {"id": connection_id})
        return removed

    def render_connection(self, connection: Connection, nodes: Optional[List[WorkflowNode]] = None) -> Optional[dict]:
        """Path and delete handle for a connection, or None when an endpoint no longer exists."""
        nodes = nodes if nodes is not None else self.nodes()
        from_node = next((n for n in nodes if n.id == connection.from_), None)
        to_node = next((n for n in nodes if n.id == connection.to), None)
        if not from_node or not to_node:
            return None

        start = self.port_position(from_node, connection.fromPort, True)
        end = self.port_position(to_node, connection.toPort, False)
        if not start or not end:
            return None

        handle = midpoint(start, end)
        return {
            **connection.model_dump(by_alias=True),
            "path": bezier_path(start, end, config.CURVE_OFFSET),
            "start": {"x": start.x, "y": start.y},
            "end": {"x": end.x, "y": end.y},
            "midpoint": {"x": handle.x, "y": handle.y},
        }

    # --- Selection ---

    def select_node(self, node_id: Optional[str]) -> Optional[dict]:
        node = self.get_node(node_id) if node_id else None
        if not node:
            self.selected_node_id = None
            self.panel = None
            return None

        self.selected_node_id = node.id
        self.panel = {"name": node.name, "type": node.type}
        if node.type == "button":
            self.panel["actions"] = list(config.ON_CLICK_ACTIONS)
            self.panel["on_click_action"] = config.ON_CLICK_ACTIONS[0]
        return self.panel

    def edit_panel(self, field: str, value) -> Optional[dict]:
        """Edits stay in the panel; nothing is written back to the component."""
        if not self.panel:
            return None

        if field == "name":
            self.panel["name"] = str(value)
        elif field == "on_click_action" and "actions" in self.panel:
            if value not in self.panel["actions"]:
                raise ValueError(f"Unknown action: {value}")
            self.panel["on_click_action"] = value
        else:
            raise ValueError(f"Field {field} is not editable for {self.panel['type']} nodes")
        return self.panel

    # --- Rendering ---

    def render(self):
        nodes = self.nodes()
        rendered = []
        for connection in self.connections:
            item = self.render_connection(connection, nodes)
            if item:
                rendered.append(item)

        return {
            "nodes": [
                {**node.model_dump(), "selected": node.id == self.selected_node_id}
                for node in nodes
            ],
            "connections": rendered,
            "pending": self.pending_line(),
            "panel": self.panel,
            "node_width": config.NODE_WIDTH,
        }

    def unmount(self):
        logger.info(f"Workflow view closed, discarding {len(self.connections)} connections")
        self._disarm()
        self.connections = []
        self.positions = {}
        self.selected_node_id = None
        self.panel = None
