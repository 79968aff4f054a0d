"""Calculate / edit offsets / reset lifecycle around the pure solver and renderer."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Union

from .model import LayoutRequest, LayoutResult, Rejection
from .offsets import OffsetEditor, OffsetListener
from .render import RenderConfig, RenderModel, render
from .solver import solve

logger = logging.getLogger(__name__)


class LayoutSession:
    """Holds the last successful layout and at most one open offset editor.

    A rejected calculation never replaces the current layout.
    """

    def __init__(self, *, render_config: Optional[RenderConfig] = None) -> None:
        self.request: Optional[LayoutRequest] = None
        self.result: Optional[LayoutResult] = None
        self.editor: Optional[OffsetEditor] = None
        self.last_rejection: Optional[Rejection] = None
        self.render_config = render_config

    @property
    def has_layout(self) -> bool:
        return self.result is not None

    def calculate(
        self,
        wall_width: float,
        wall_height: float,
        picture_width: float,
        picture_height: float,
        quantity: int,
        hanging_height: float,
    ) -> Union[LayoutResult, Rejection]:
        request = LayoutRequest.from_values(
            wall_width, wall_height, picture_width, picture_height, quantity, hanging_height
        )
        outcome = solve(request)
        if isinstance(outcome, Rejection):
            self.last_rejection = outcome
            logger.info("Keeping previous layout after rejection (%s)", outcome.reason.value)
            return outcome
        self.request = request
        self.result = outcome
        self.editor = None
        self.last_rejection = None
        return outcome

    def _require_result(self) -> LayoutResult:
        if self.result is None:
            raise RuntimeError("no layout has been calculated")
        return self.result

    def edit_offsets(self, on_change: Optional[OffsetListener] = None) -> OffsetEditor:
        self.editor = OffsetEditor(self._require_result(), on_change=on_change)
        return self.editor

    def apply_offsets(self, values: Optional[Sequence[float]] = None) -> List[float]:
        """Commit ``values`` (or the open editor's working copy) and close the editor."""

        result = self._require_result()
        if values is None:
            if self.editor is None:
                raise RuntimeError("no offset editor is open")
            committed = self.editor.commit()
        else:
            result.commit_offsets(values)
            committed = list(result.vertical_offsets)
        self.editor = None
        return committed

    def close_editor(self) -> None:
        """Leave the editor without applying; committed offsets are kept."""

        if self.editor is not None:
            self.editor.discard()
        self.editor = None

    def render(self, surface_width_px: float) -> RenderModel:
        result = self._require_result()
        offsets = self.editor.preview() if self.editor is not None else None
        return render(
            result,
            result.request.hanging_height,
            surface_width_px,
            offsets=offsets,
            config=self.render_config,
        )

    def reset(self) -> None:
        self.request = None
        self.result = None
        self.editor = None
        self.last_rejection = None
