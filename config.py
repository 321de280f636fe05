import os
from pathlib import Path

# Define the root directory of the project
ROOT_DIR = Path(__file__).resolve().parent

# Saved apps live under <root>/<workspace>/apps
WORKSPACE_ROOT = Path(os.environ.get("APPBUILDER_WORKSPACE_ROOT", ROOT_DIR / "appbuilder" / "workspaces"))

# Canvas Defaults
MIN_SCALE = 0.5
MAX_SCALE = 2.0
SCALE_STEP = 0.1
GRID_SIZE = 20
DRAG_EPSILON = 0.0
MIN_COMPONENT_SIZE = 10
RESIZE_HANDLES = ["nw", "ne", "sw", "se"]

# New components
DEFAULT_POSITION = (100, 100)
DEFAULT_SIZE = (200, 100)

# Workflow Defaults
NODE_WIDTH = 200
PORT_OFFSET_Y = 30
PORT_SPACING = 30
CURVE_OFFSET = 50
LAYOUT_MODE = "random"  # "random" or "canvas"
LAYOUT_ORIGIN = (100, 100)
LAYOUT_SPREAD = (400, 300)
ON_CLICK_ACTIONS = ["Navigate to page", "Show modal", "Submit form", "Custom function"]
