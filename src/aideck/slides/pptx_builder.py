# src/aideck/slides/pptx_builder.py
from __future__ import annotations
from typing import Dict, List, Optional
import io
import re
from pptx import Presentation
from pptx.util import Inches, Pt
from pptx.enum.text import PP_PARAGRAPH_ALIGNMENT
from pptx.dml.color import RGBColor

from aideck.slides.descriptors import SlideDescriptor, TextBlock

BLANK_LAYOUT = 6

# XML 1.0 forbids these; core properties are stored without escaping
_XML_ILLEGAL = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")

_ALIGN = {
    "left": PP_PARAGRAPH_ALIGNMENT.LEFT,
    "center": PP_PARAGRAPH_ALIGNMENT.CENTER,
    "right": PP_PARAGRAPH_ALIGNMENT.RIGHT,
}

def _set_run_style(run, block: TextBlock):
    if block.font_face:
        run.font.name = block.font_face
    run.font.size = Pt(block.font_size)
    run.font.bold = block.bold
    run.font.color.rgb = RGBColor.from_string(block.color)

def _fill_background(slide, color: str):
    fill = slide.background.fill
    fill.solid()
    fill.fore_color.rgb = RGBColor.from_string(color)

def _add_text_block(slide, block: TextBlock):
    tb = slide.shapes.add_textbox(Inches(block.x), Inches(block.y), Inches(block.w), Inches(block.h))
    tf = tb.text_frame
    tf.word_wrap = block.wrap
    # one paragraph per line keeps preformatted bodies intact
    for i, line in enumerate(block.text.split("\n")):
        p = tf.paragraphs[0] if i == 0 else tf.add_paragraph()
        p.alignment = _ALIGN.get(block.align, PP_PARAGRAPH_ALIGNMENT.LEFT)
        run = p.add_run()
        run.text = line
        _set_run_style(run, block)

def _layout(prs: Presentation):
    layouts = prs.slide_layouts
    return layouts[BLANK_LAYOUT] if len(layouts) > BLANK_LAYOUT else layouts[len(layouts) - 1]

def _property_text(value: str) -> str:
    return _XML_ILLEGAL.sub(" ", value)[:255]

def render_pptx(slides: List[SlideDescriptor], metadata: Optional[Dict[str, str]] = None) -> bytes:
    """
    Render descriptors into an in-memory .pptx and return its bytes.
    """
    prs = Presentation()
    meta = metadata or {}
    props = prs.core_properties
    if meta.get("title"):
        props.title = _property_text(meta["title"])
    if meta.get("subject"):
        props.subject = _property_text(meta["subject"])
    if meta.get("author"):
        props.author = _property_text(meta["author"])

    for desc in slides:
        slide = prs.slides.add_slide(_layout(prs))
        _fill_background(slide, desc.background)
        for block in desc.blocks:
            _add_text_block(slide, block)

    buf = io.BytesIO()
    prs.save(buf)
    return buf.getvalue()
