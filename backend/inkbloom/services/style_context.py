import logging
from typing import Dict, Optional

from ..models import DEFAULT_SESSION, SceneRecord, StyleContext

logger = logging.getLogger(__name__)

DARK_PALETTE = "muted shadows"
NATURAL_PALETTE = "natural tones"


def derive_style_context(scene: SceneRecord) -> StyleContext:
    """Map a parsed scene onto the style hints used for image prompts."""
    palette = DARK_PALETTE if "dark" in scene.mood.lower() else NATURAL_PALETTE
    return StyleContext(
        character_design=scene.characters,
        color_palette=palette,
        camera_style=scene.camera,
    )


class StyleContextStore:
    """In-memory style context per session, lost on restart.

    Reads and writes never await, so each one is atomic on the event loop.
    Concurrent scenes in the same session still race: last writer wins.
    """

    def __init__(self):
        self._contexts: Dict[str, StyleContext] = {}

    @staticmethod
    def _key(session_id: Optional[str]) -> str:
        return session_id or DEFAULT_SESSION

    def get(self, session_id: Optional[str] = None) -> StyleContext:
        context = self._contexts.get(self._key(session_id))
        # Hand out a copy so callers can't mutate the stored record
        return context.model_copy() if context else StyleContext()

    def update(self, scene: SceneRecord, session_id: Optional[str] = None) -> StyleContext:
        context = derive_style_context(scene)
        self._contexts[self._key(session_id)] = context
        logger.info("Style context updated for session %s: %s", self._key(session_id), context)
        return context.model_copy()

    def clear(self) -> None:
        self._contexts.clear()


style_store = StyleContextStore()
