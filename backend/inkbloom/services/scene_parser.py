import re
from typing import Dict

from ..models import SceneRecord

# Label as written by the model -> SceneRecord field
SCENE_LABELS: Dict[str, str] = {
    "characters": "characters",
    "setting": "setting",
    "mood": "mood",
    "camera": "camera",
    "actions": "actions",
}

_LINE_PATTERN = re.compile(
    r"^\s*(" + "|".join(SCENE_LABELS) + r")\s*[:\-]\s*(.+)$",
    re.IGNORECASE,
)


def parse_scene_breakdown(raw: str) -> SceneRecord:
    """Extract the five labeled scene fields from a model reply.

    Best effort: lines that don't start with a known label are skipped,
    a repeated label keeps its last value and a missing label stays empty.
    """
    fields = {field: "" for field in SCENE_LABELS.values()}
    for line in (raw or "").split("\n"):
        match = _LINE_PATTERN.match(line)
        if not match:
            continue
        fields[SCENE_LABELS[match.group(1).lower()]] = match.group(2).strip()
    return SceneRecord(**fields)
