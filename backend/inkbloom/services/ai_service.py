import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import BaseModel, ValidationError

from ..config import settings
from ..exceptions import UpstreamError
from ..models import Classification
from .prompt_builder import (
    build_breakdown_prompt,
    build_classification_prompt,
    build_relevance_prompt,
)

logger = logging.getLogger(__name__)


class GeneratedImage(BaseModel):
    url: str


class ImageGenerationResult(BaseModel):
    data: List[GeneratedImage]


class AIProcessor:
    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = settings.OPENAI_API_KEY
        self.base_url = settings.OPENAI_BASE_URL.rstrip("/")
        self.chat_model = settings.OPENAI_CHAT_MODEL
        self.image_model = settings.OPENAI_IMAGE_MODEL
        self.image_count = settings.IMAGE_COUNT
        self.image_size = settings.IMAGE_SIZE
        self.timeout = settings.REQUEST_TIMEOUT_SECONDS
        # Tests swap in httpx.MockTransport here
        self.transport = transport

    async def _post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """POST JSON to the API and return the decoded body."""
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url, timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.post(path, headers=headers, json=payload)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            raise UpstreamError(
                f"{path} returned HTTP {e.response.status_code}",
                detail=e.response.text[:500],
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"{path} request failed: {e}") from e
        except ValueError as e:
            raise UpstreamError(f"{path} returned invalid JSON") from e

    async def complete(self, prompt: str) -> str:
        """Send a single user message and return the reply text"""
        body = await self._post(
            "/chat/completions",
            {
                "model": self.chat_model,
                "messages": [{"role": "user", "content": prompt}],
            },
        )
        try:
            content = body["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise UpstreamError("Completion response has no message content") from e
        if not isinstance(content, str):
            raise UpstreamError("Completion message content is not text")
        return content

    async def classify_teaser(self, teaser: str) -> str:
        """Ask the model to label the teaser as story, non-story or unclear.

        The reply is only trimmed and lower-cased; anything other than the
        three labels is passed through and treated as not a story.
        """
        reply = await self.complete(build_classification_prompt(teaser))
        classification = reply.strip().lower()
        if classification not in {c.value for c in Classification}:
            logger.warning("Unexpected teaser classification: %r", classification)
        return classification

    async def check_relevance(self, teaser: str) -> bool:
        """Yes/no fallback for unclear teasers. Any reply containing "yes" counts."""
        reply = await self.complete(build_relevance_prompt(teaser))
        return "yes" in reply.strip().lower()

    async def breakdown_scene(self, teaser: str) -> str:
        """Request the five labeled scene lines and return the raw reply"""
        raw = await self.complete(build_breakdown_prompt(teaser))
        logger.debug("Raw scene breakdown:\n%s", raw)
        return raw

    async def generate_images(self, prompt: str) -> List[str]:
        """Generate images for the prompt and return their URLs in order"""
        body = await self._post(
            "/images/generations",
            {
                "model": self.image_model,
                "prompt": prompt,
                "n": self.image_count,
                "size": self.image_size,
            },
        )
        try:
            result = ImageGenerationResult.model_validate(body)
        except ValidationError as e:
            raise UpstreamError("Image response is not a list of URLs") from e
        return [image.url for image in result.data]
