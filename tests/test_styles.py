import pytest

from cornerstones.assessments.enums import VarkStyle
from cornerstones.assessments.vark.styles import STYLE_METADATA, format_style_name, style_color, style_metadata


def test_metadata_covers_every_style_in_precedence_order():
    assert list(STYLE_METADATA) == list(VarkStyle)
    assert [m.icon for m in STYLE_METADATA.values()] == ["eye", "ear", "book-open", "hand"]


def test_format_style_name():
    assert format_style_name("visual") == "Visual"
    assert format_style_name("reading_writing") == "Reading/Writing"
    assert format_style_name("telepathic") == "telepathic"


def test_style_color_falls_back_to_visual():
    assert style_color("kinesthetic").primary == "#DC2626"
    assert style_color("unknown") == style_color("visual")


def test_style_metadata_rejects_unknown_tag():
    assert style_metadata("auditory").name == "Auditory"
    with pytest.raises(KeyError):
        style_metadata("unknown")


def test_styles_endpoint(client):
    r = client.get("/styles")
    assert r.status_code == 200
    body = r.json()
    assert body["significance_threshold"] == 25
    assert body["dominant_threshold"] == 30
    assert [s["style"] for s in body["styles"]] == ["visual", "auditory", "reading_writing", "kinesthetic"]
    assert body["styles"][0]["theme"]["primary"] == "#9333EA"
