from ..models import SceneRecord, StyleContext


def build_classification_prompt(teaser: str) -> str:
    return f"""Classify this teaser using one of these labels only:
- story
- non-story
- unclear

Teaser: "{teaser}\""""


def build_relevance_prompt(teaser: str) -> str:
    return f"""Does this teaser describe a cinematic story scene? Answer yes or no only.

"{teaser}\""""


def build_breakdown_prompt(teaser: str) -> str:
    return f"""
You are a scene breakdown parser. Format the following teaser using exactly five labeled fields:

Characters: [Who is present]
Setting: [Where the scene takes place]
Mood: [Emotional tone]
Camera: [Suggested camera angle/style]
Actions: [Key movements or events]

Only reply with those five labeled lines.

Teaser: "{teaser}\""""


def build_scene_prompt(scene: SceneRecord) -> str:
    """Render (possibly user-edited) scene fields as an image prompt."""
    return f"""
Characters: {scene.characters}
Setting: {scene.setting}
Mood: {scene.mood}
Camera: {scene.camera}
Actions: {scene.actions}
""".strip()


def build_styled_prompt(prompt: str, style: StyleContext) -> str:
    """Append the visual consistency block so consecutive images look alike."""
    return f"""
{prompt}

Visual Consistency:
Character Design: {style.character_design}
Color Palette: {style.color_palette}
Camera Style: {style.camera_style}
""".strip()


def build_next_teaser(teaser: str) -> str:
    return f"Next scene after: {teaser}"
