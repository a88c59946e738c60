"""User interface: visual nodes, rendering and the display window.

:class:`hud_view.ui.hud.HudPanel` is exported from the top-level package.
"""

from hud_view.ui.display import DisplayWindow, KeyAction
from hud_view.ui.nodes import ImageNode, Label, Node, ScrollPane, VBox, VisualNode
from hud_view.ui.renderer import NodeRenderer, RenderLayout

__all__ = [
    "DisplayWindow",
    "KeyAction",
    "VisualNode",
    "Node",
    "Label",
    "VBox",
    "ScrollPane",
    "ImageNode",
    "NodeRenderer",
    "RenderLayout",
]
