"""Linear (document) rendering of lecture content."""

from __future__ import annotations

from lecture_slides.markers import MARKER_RE

SLIDE_DIVIDER = (
    '<div class="slide-divider">'
    '<span class="slide-divider-label">Slide Break</span>'
    "</div>"
)


def render_linear(content: str) -> str:
    """Replace every slide marker with a visible divider and trim the result."""
    if not content:
        return ""
    return MARKER_RE.sub(SLIDE_DIVIDER, content).strip()


__all__ = ["SLIDE_DIVIDER", "render_linear"]
