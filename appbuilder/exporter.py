from html import escape

import config

STROKE = "#6366F1"
PORT_RADIUS = 6

def _box_height(node) -> float:
    rows = max(len(node["inputs"]), len(node["outputs"]), 1)
    return config.PORT_OFFSET_Y + rows * config.PORT_SPACING

def render_workflow_svg(view: dict) -> str:
    """Standalone SVG document for a WorkflowEditor.render() view."""
    nodes = view["nodes"]
    width = config.NODE_WIDTH + max((n["position"]["x"] for n in nodes), default=0) + 100
    height = max((n["position"]["y"] + _box_height(n) for n in nodes), default=0) + 100

    svg = []
    svg.append(f'<svg xmlns="http://www.w3.org/2000/svg" width="{width:.0f}" height="{height:.0f}">')

    # Arrow marker definition
    svg.append("  <defs>")
    svg.append('    <marker id="arrowhead" markerWidth="10" markerHeight="7" refX="9" refY="3.5" orient="auto">')
    svg.append(f'      <polygon points="0 0, 10 3.5, 0 7" fill="{STROKE}" />')
    svg.append("    </marker>")
    svg.append("  </defs>")

    for node in nodes:
        x, y = node["position"]["x"], node["position"]["y"]
        border = "#3B82F6" if node.get("selected") else "#E5E7EB"
        svg.append(f'  <g class="node" data-id="{escape(node["id"])}">')
        svg.append(f'    <rect x="{x:.2f}" y="{y:.2f}" width="{config.NODE_WIDTH}" height="{_box_height(node)}" '
                   f'rx="6" fill="white" stroke="{border}" />')
        svg.append(f'    <text x="{x + 10:.2f}" y="{y + 18:.2f}" font-size="13">{escape(node["name"])}</text>')

        for i, port in enumerate(node["inputs"]):
            py = y + config.PORT_OFFSET_Y + i * config.PORT_SPACING
            svg.append(f'    <circle cx="{x:.2f}" cy="{py:.2f}" r="{PORT_RADIUS}" fill="#3B82F6" />')
            svg.append(f'    <text x="{x + 10:.2f}" y="{py + 4:.2f}" font-size="11">{escape(port["name"])}</text>')

        for i, port in enumerate(node["outputs"]):
            px = x + config.NODE_WIDTH
            py = y + config.PORT_OFFSET_Y + i * config.PORT_SPACING
            svg.append(f'    <circle cx="{px:.2f}" cy="{py:.2f}" r="{PORT_RADIUS}" fill="{STROKE}" />')
            svg.append(f'    <text x="{px - 10:.2f}" y="{py + 4:.2f}" font-size="11" text-anchor="end">'
                       f'{escape(port["name"])}</text>')
        svg.append("  </g>")

    # Connections, drawn over the nodes
    for connection in view["connections"]:
        mid = connection["midpoint"]
        svg.append(f'  <g class="connection" data-id="{escape(connection["id"])}">')
        svg.append(f'    <path d="{connection["path"]}" stroke="{STROKE}" stroke-width="2" fill="none" '
                   f'marker-end="url(#arrowhead)" />')
        svg.append(f'    <circle cx="{mid["x"]:.2f}" cy="{mid["y"]:.2f}" r="6" fill="{STROKE}" '
                   f'stroke="white" stroke-width="1" />')
        svg.append("  </g>")

    pending = view.get("pending")
    if pending:
        svg.append(f'  <line id="temp-connection" x1="{pending["x1"]:.2f}" y1="{pending["y1"]:.2f}" '
                   f'x2="{pending["x2"]:.2f}" y2="{pending["y2"]:.2f}" stroke="{STROKE}" stroke-width="2" '
                   f'stroke-dasharray="5,5" marker-end="url(#arrowhead)" />')

    svg.append("</svg>")
    return "\n".join(svg)
