from inkbloom.models import SceneRecord
from inkbloom.services.scene_parser import parse_scene_breakdown

WELL_FORMED = [
    "Characters: A girl in a red raincoat",
    "Setting: Rainy rooftop at night",
    "Mood: Lonely, reflective",
    "Camera: Wide shot from behind",
    "Actions: She stares at the city lights",
]


def test_parses_five_labeled_lines():
    scene = parse_scene_breakdown("\n".join(WELL_FORMED))

    assert scene == SceneRecord(
        characters="A girl in a red raincoat",
        setting="Rainy rooftop at night",
        mood="Lonely, reflective",
        camera="Wide shot from behind",
        actions="She stares at the city lights",
    )


def test_line_order_does_not_matter():
    forward = parse_scene_breakdown("\n".join(WELL_FORMED))
    backward = parse_scene_breakdown("\n".join(reversed(WELL_FORMED)))
    shuffled = parse_scene_breakdown("\n".join(WELL_FORMED[2:] + WELL_FORMED[:2]))

    assert forward == backward == shuffled


def test_hyphen_separator_and_case_insensitive_labels():
    raw = "CHARACTERS - Two detectives\n  setting:Harbor warehouse  \nmOOd -  tense "

    scene = parse_scene_breakdown(raw)

    assert scene.characters == "Two detectives"
    assert scene.setting == "Harbor warehouse"
    assert scene.mood == "tense"


def test_last_duplicate_label_wins():
    raw = "Mood: calm\nCharacters: An old man\nMood: ominous"

    assert parse_scene_breakdown(raw).mood == "ominous"


def test_ignores_prose_and_blank_lines():
    raw = "Sure! Here is the breakdown:\n\nCharacters: A fox\n\nHope this helps."

    scene = parse_scene_breakdown(raw)

    assert scene.characters == "A fox"
    assert scene.setting == ""
    assert scene.actions == ""


def test_missing_labels_stay_empty():
    scene = parse_scene_breakdown("nothing useful here")

    assert scene.model_dump() == {
        "characters": "",
        "setting": "",
        "mood": "",
        "camera": "",
        "actions": "",
    }


def test_label_without_value_is_ignored():
    scene = parse_scene_breakdown("Camera:\nCamera: Low angle")

    assert scene.camera == "Low angle"


def test_separator_inside_value_is_kept():
    scene = parse_scene_breakdown("Setting: Tokyo - 2049: a neon market")

    assert scene.setting == "Tokyo - 2049: a neon market"
