# backend/inkbloom/models.py
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_SESSION = "default"


class Classification(str, Enum):
    STORY = "story"
    NON_STORY = "non-story"
    UNCLEAR = "unclear"


class SceneRecord(BaseModel):
    characters: str = ""
    setting: str = ""
    mood: str = ""
    camera: str = ""
    actions: str = ""


class StyleContext(BaseModel):
    """Visual style carried from the last scene into image prompts."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    character_design: str = ""
    color_palette: str = ""
    camera_style: str = ""


class SceneRequest(BaseModel):
    teaser: Optional[str] = None
    # Only a literal JSON true enables the override
    override: Any = False
    session_id: Optional[str] = None

    @property
    def force(self) -> bool:
        return self.override is True


class NextSceneRequest(BaseModel):
    teaser: Optional[str] = None
    session_id: Optional[str] = None


class ImageRequest(BaseModel):
    prompt: Optional[str] = None
    session_id: Optional[str] = None


class ImageResponse(BaseModel):
    images: List[str]


class RejectionResponse(BaseModel):
    error: str
    type: str
    allow_override: bool = Field(default=True, serialization_alias="allowOverride")
