"""Panel declaration schemas: tabs and sidebar sections of a profile.

A PanelDeclaration says: this panel body -> shown under these data
conditions -> with this static config. Declarations are module-level
constants of each entity kind and are never mutated. Consumer apps
dispatch `component` to their own component library.

Visibility and enablement are separate axes. A hidden panel is not
rendered at all; a visible but disabled panel is still rendered so its
body can show an empty state.
"""

from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

# (urn, record or None) -> bool. Must be total over partial records.
PanelPredicate = Callable[[str, Optional[Any]], bool]


class PanelDisplay(BaseModel):
    """Optional visible/enabled predicates. A missing predicate is True."""

    model_config = ConfigDict(frozen=True)

    visible: Optional[PanelPredicate] = None
    enabled: Optional[PanelPredicate] = None


class PanelDeclaration(BaseModel):
    """One tab (named) or one sidebar section (unnamed, ordered)."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = Field(
        default=None,
        description="Tab name; sidebar sections have none",
    )
    component: str = Field(
        ...,
        description="Panel body key, e.g. 'lineage_tab', 'sidebar_owner_section'",
    )
    display: Optional[PanelDisplay] = None
    properties: dict[str, Any] = Field(
        default_factory=dict,
        description="Static config passed to the panel body",
    )

    @property
    def is_data_gated(self) -> bool:
        """True when visibility or enablement depends on fetched data."""
        return self.display is not None

    @property
    def label(self) -> str:
        return self.name or self.component


class PanelState(BaseModel):
    """Evaluation result for one declaration against one record snapshot."""

    model_config = ConfigDict(frozen=True)

    declaration: PanelDeclaration
    is_visible: bool
    is_enabled: bool


class ComposedPanel(BaseModel):
    """A rendered panel in a composed profile."""

    name: Optional[str] = None
    component: str
    properties: dict[str, Any] = Field(default_factory=dict)
    enabled: bool = True
