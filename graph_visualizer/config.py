"""
Fixed presentation constants of the editor.
Nothing here is read from user input: the window title, sizes and palette
are part of the look of the tool.
"""

# ---------- window ----------

WINDOW_TITLE = "Graph Visualizer"
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600

INSTRUCTIONS = (
    "Instructions:\n"
    "• Left click anywhere to create a node\n"
    "• Left click and drag a node to move it\n"
    "• Right click and drag from one node to another to create an edge"
)

# ---------- geometry ----------

NODE_RADIUS = 25
DETECTION_RADIUS = 30

# two node radii plus a small margin
WEIGHT_OFFSET = 52

EDGE_WIDTH = 2
LABEL_PADDING = 4
DASH_PATTERN = (5.0, 5.0)

# ---------- palette ----------

COLOR_BACKGROUND = "#ffffff"
COLOR_EDGE = "#000000"
COLOR_EDGE_LABEL_BG = "#ffffff"
COLOR_EDGE_LABEL = "#000000"
COLOR_PROVISIONAL_EDGE = "#808080"

COLOR_NODE_BASE = "#ffffff"
COLOR_NODE_SELECTED = "#c0c0c0"
COLOR_NODE_HIGHLIGHTED = "#ffff00"
COLOR_NODE_BORDER = "#000000"
COLOR_NODE_LABEL = "#000000"

# ---------- logging ----------

LOG_LEVEL_ENV = "GRAPH_VISUALIZER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
