"""Drawing rule interface.

A rule draws one kind of element (panes, bars, hinge marks, labels) and
says for itself whether it has anything to draw for a given window. The
registry runs the applicable rules one after another over a shared
DrawingContext.
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from joinery.models import DrawingContext, Layer, RectShape, Shape


class DrawingRule(ABC):
    """Subclasses provide an id, a display name, `applies()` and `generate()`."""

    # Rules run in ascending priority.
    priority: int = 100

    # Rule ids placed before this one when they run in the same render.
    dependencies: list[str] = []

    # Output goes to the annotation group, outside the window offset.
    annotation: bool = False

    @abstractmethod
    def get_id(self) -> str:
        """Dotted id, e.g. 'glazing.georgian_bars'."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        ...

    @abstractmethod
    def applies(self, context: DrawingContext) -> bool:
        ...

    @abstractmethod
    def generate(self, context: DrawingContext) -> list[Shape]:
        """
        Return the shapes for this rule.

        Pane rules also append to `context.panes`, which the bar and
        hinge rules read.
        """
        ...


def outer_frame(context: DrawingContext) -> RectShape:
    """The outline every window and door shares."""
    m = context.metrics
    return RectShape(
        layer=Layer.FRAME,
        x=0.0, y=0.0, width=m.scaled_width, height=m.scaled_height,
        tags={"part": "outer"},
    )
