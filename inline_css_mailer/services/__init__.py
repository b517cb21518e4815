from inline_css_mailer.services.content_type import ContentTypeFinalizer
from inline_css_mailer.services.inline_css_hook import InlineCssHook, delivering_email
from inline_css_mailer.services.part_assembler import PartAssembler
from inline_css_mailer.services.style_inliner import PremailerEngine, StyleInliner, StylingEngine

__all__ = [
    "ContentTypeFinalizer",
    "InlineCssHook",
    "PartAssembler",
    "PremailerEngine",
    "StyleInliner",
    "StylingEngine",
    "delivering_email",
]
