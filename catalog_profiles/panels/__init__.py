"""Panel declarations - conditionally visible tabs and sidebar sections.

Pure declaration plus a small evaluator. Consumer apps dispatch each
rendered panel's component key to their own component library.
"""

from .schemas import (
    ComposedPanel,
    PanelDeclaration,
    PanelDisplay,
    PanelPredicate,
    PanelState,
)
from .engine import compose_panels, evaluate_panel, evaluate_panels, visible_panels

__all__ = [
    "ComposedPanel",
    "PanelDeclaration",
    "PanelDisplay",
    "PanelPredicate",
    "PanelState",
    "compose_panels",
    "evaluate_panel",
    "evaluate_panels",
    "visible_panels",
]
