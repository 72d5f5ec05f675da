import io

from pptx import Presentation
from pptx.dml.color import RGBColor

from aideck.slides.descriptors import (
    build_descriptors, deck_metadata, prompt_subtitle, truncate_content,
    CONTENT_MAX_CHARS, PROMPT_PREVIEW_CHARS,
)
from aideck.slides.pptx_builder import render_pptx


def _texts(slide):
    return [sh.text_frame.text for sh in slide.shapes if sh.has_text_frame]


def test_subtitle_always_ends_with_ellipsis():
    assert prompt_subtitle("hi") == "Prompt: hi..."
    long = "p" * 500
    sub = prompt_subtitle(long)
    assert sub.endswith("...")
    assert sub[len("Prompt: "):-3] == "p" * PROMPT_PREVIEW_CHARS


def test_content_truncation_boundary():
    exact = "a" * CONTENT_MAX_CHARS
    assert truncate_content(exact) == exact
    over = "b" * (CONTENT_MAX_CHARS + 1)
    assert truncate_content(over) == "b" * CONTENT_MAX_CHARS + "\n..."


def test_descriptor_order_and_headings():
    slides = build_descriptors("X", {"chatgpt": "one", "claude": "Error: boom"})
    assert [s.kind for s in slides] == ["title", "content", "content"]
    assert slides[0].background == "1F2937"
    assert slides[0].blocks[0].text == "AI Aggregation Results"
    assert [s.blocks[0].text for s in slides[1:]] == ["CHATGPT", "CLAUDE"]
    body = slides[1].blocks[1]
    assert body.font_face == "Courier New"
    assert body.text == "one"
    assert slides[1].background == "FFFFFF"


def test_non_string_value_is_pretty_printed():
    slides = build_descriptors("X", {"gemini": {"a": [1, 2]}})
    assert slides[1].blocks[1].text == '{\n  "a": [\n    1,\n    2\n  ]\n}'


def test_rendered_deck_is_readable():
    results = {"chatgpt": "line 1\nline 2", "gemini": "g" * 4000}
    data = render_pptx(build_descriptors("Explain 5G", results), deck_metadata("Explain 5G"))
    prs = Presentation(io.BytesIO(data))

    assert len(prs.slides) == 3
    assert prs.core_properties.title == "AI Aggregation Results"
    assert prs.core_properties.subject == "Explain 5G"
    assert prs.core_properties.author == "Telecom Prompt Generator"

    title, first, second = list(prs.slides)
    assert _texts(title) == ["AI Aggregation Results", "Prompt: Explain 5G..."]
    assert title.background.fill.fore_color.rgb == RGBColor.from_string("1F2937")
    assert _texts(first) == ["CHATGPT", "line 1\nline 2"]
    assert _texts(second)[1].endswith("\n...")
