# offline_translator/application/session.py
"""
State of the two text panes of the main window.

The window keeps a PaneState and replaces it on every user action; which way a
translation goes is computed from the state instead of being tracked by the
widgets themselves.
"""
from typing import NamedTuple, Optional

from offline_translator.domain.models import Side


class PaneState(NamedTuple):
    left_text: str = ""
    right_text: str = ""
    left_language: Optional[str] = None
    right_language: Optional[str] = None
    last_edited: Side = Side.LEFT

    def text(self, side: Side) -> str:
        return self.left_text if side is Side.LEFT else self.right_text

    def language(self, side: Side) -> Optional[str]:
        return self.left_language if side is Side.LEFT else self.right_language


class TranslationPlan(NamedTuple):
    text: str
    source_selector: Optional[str]
    target_selector: Optional[str]
    output_side: Side


def plan_translation(state: PaneState) -> TranslationPlan:
    """The last edited pane is the source; the other pane receives the translation."""
    source = state.last_edited
    target = source.other
    return TranslationPlan(
        text=state.text(source),
        source_selector=state.language(source),
        target_selector=state.language(target),
        output_side=target,
    )


def apply_edit(state: PaneState, side: Side, text: str) -> PaneState:
    """
    Records text typed into a pane. Clearing a pane also clears the other
    one, so a stale translation is never left next to an empty input.
    """
    if side is Side.LEFT:
        state = state._replace(left_text=text, last_edited=side)
    else:
        state = state._replace(right_text=text, last_edited=side)

    if not text.strip():
        if side is Side.LEFT:
            state = state._replace(right_text="")
        else:
            state = state._replace(left_text="")
    return state


def select_language(state: PaneState, side: Side, language: Optional[str]) -> PaneState:
    if side is Side.LEFT:
        return state._replace(left_language=language)
    return state._replace(right_language=language)


def swap(state: PaneState) -> PaneState:
    """Swaps languages and texts; the same text stays the source of the next translation."""
    return PaneState(
        left_text=state.right_text,
        right_text=state.left_text,
        left_language=state.right_language,
        right_language=state.left_language,
        last_edited=state.last_edited.other,
    )


def can_translate(state: PaneState) -> bool:
    return bool(plan_translation(state).text.strip())
