import logging
from typing import List, Optional

from ..exceptions import InvalidInputError, TeaserRejectedError
from ..models import Classification, SceneRecord
from .ai_service import AIProcessor
from .prompt_builder import build_next_teaser, build_styled_prompt
from .scene_parser import parse_scene_breakdown
from .style_context import StyleContextStore

logger = logging.getLogger(__name__)

MIN_TEASER_LENGTH = 10
MIN_PROMPT_LENGTH = 5


def clean_text(text: Optional[str], min_length: int, message: str) -> str:
    """Trim caller text and reject it when it is missing or too short"""
    cleaned = text.strip() if isinstance(text, str) else ""
    if len(cleaned) < min_length:
        raise InvalidInputError(message)
    return cleaned


class SceneService:
    def __init__(self, ai_processor: AIProcessor, style_store: StyleContextStore):
        self.ai_processor = ai_processor
        self.style_store = style_store

    async def ensure_story(self, teaser: str) -> str:
        """Gate decision without override; returns the classification.

        A "story" label passes straight away, an "unclear" label defers to the
        yes/no fallback and every other label fails.
        """
        classification = await self.ai_processor.classify_teaser(teaser)
        logger.info("Teaser classification: %s", classification)

        if classification == Classification.STORY.value:
            return classification
        if classification == Classification.UNCLEAR.value:
            relevant = await self.ai_processor.check_relevance(teaser)
            logger.info("Fallback relevance: %s", relevant)
            if relevant:
                return classification
        raise TeaserRejectedError(classification)

    async def generate_scene(
        self,
        teaser: Optional[str],
        override: bool = False,
        session_id: Optional[str] = None,
    ) -> SceneRecord:
        teaser = clean_text(teaser, MIN_TEASER_LENGTH, "Teaser must be at least 10 characters.")

        if not override:
            await self.ensure_story(teaser)

        raw = await self.ai_processor.breakdown_scene(teaser)
        scene = parse_scene_breakdown(raw)
        logger.info("Parsed scene elements: %s", scene.model_dump())

        self.style_store.update(scene, session_id)
        return scene

    async def generate_next_scene(
        self, teaser: Optional[str], session_id: Optional[str] = None
    ) -> SceneRecord:
        """Continue from a previous teaser; the follow-up always skips the gate"""
        teaser = clean_text(teaser, MIN_TEASER_LENGTH, "Teaser must be at least 10 characters.")
        return await self.generate_scene(build_next_teaser(teaser), override=True, session_id=session_id)

    async def generate_images(self, prompt: Optional[str], session_id: Optional[str] = None) -> List[str]:
        prompt = clean_text(prompt, MIN_PROMPT_LENGTH, "Valid image prompt required.")
        styled_prompt = build_styled_prompt(prompt, self.style_store.get(session_id))

        images = await self.ai_processor.generate_images(styled_prompt)
        logger.info("Image URLs: %s", images)
        return images
