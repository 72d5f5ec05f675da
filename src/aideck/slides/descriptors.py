# src/aideck/slides/descriptors.py
"""
Result mapping -> slide descriptors.

A descriptor is the layout-level description of one slide (background plus
positioned text blocks); pptx_builder turns a list of them into a deck.
Geometry is in inches, colors are RGB hex without '#'.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

DECK_TITLE = "AI Aggregation Results"
DECK_AUTHOR = "Telecom Prompt Generator"

PROMPT_PREVIEW_CHARS = 100
CONTENT_MAX_CHARS = 3500
ELLIPSIS = "..."

TITLE_BG = "1F2937"
CONTENT_BG = "FFFFFF"


@dataclass
class TextBlock:
    text: str
    x: float
    y: float
    w: float
    h: float
    font_size: int = 18
    bold: bool = False
    color: str = "000000"
    align: str = "left"  # left | center | right
    font_face: str | None = None
    wrap: bool = True


@dataclass
class SlideDescriptor:
    background: str
    blocks: List[TextBlock] = field(default_factory=list)
    kind: str = "content"  # title | content


def as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


def truncate_content(text: str, limit: int = CONTENT_MAX_CHARS) -> str:
    if len(text) > limit:
        return text[:limit] + "\n" + ELLIPSIS
    return text


def prompt_subtitle(prompt: str) -> str:
    # ellipsis is appended even for short prompts
    return f"Prompt: {prompt[:PROMPT_PREVIEW_CHARS]}{ELLIPSIS}"


def title_slide(prompt: str) -> SlideDescriptor:
    return SlideDescriptor(
        background=TITLE_BG,
        kind="title",
        blocks=[
            TextBlock(DECK_TITLE, x=0.5, y=2.5, w=9, h=1.5,
                      font_size=48, bold=True, color="FFFFFF", align="center"),
            TextBlock(prompt_subtitle(prompt), x=0.5, y=4.2, w=9, h=1,
                      font_size=18, color="D1D5DB", align="center", font_face="Arial"),
        ],
    )


def content_slide(name: str, value: Any) -> SlideDescriptor:
    return SlideDescriptor(
        background=CONTENT_BG,
        blocks=[
            TextBlock(name.upper(), x=0.5, y=0.5, w=9, h=0.8,
                      font_size=32, bold=True, color="1F2937"),
            TextBlock(truncate_content(as_text(value)), x=0.5, y=1.2, w=9, h=5.3,
                      font_size=11, color="374151", font_face="Courier New", wrap=True),
        ],
    )


def build_descriptors(prompt: str, results: Mapping[str, Any]) -> List[SlideDescriptor]:
    """One title slide, then one content slide per result in mapping order."""
    slides = [title_slide(prompt)]
    for name, value in results.items():
        slides.append(content_slide(name, value))
    return slides


def deck_metadata(prompt: str) -> Dict[str, str]:
    return {"title": DECK_TITLE, "subject": prompt, "author": DECK_AUTHOR}
