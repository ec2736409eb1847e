from .header_renderer import render_header, render_label
from .value_formatter import format_value

__all__ = ["format_value", "render_header", "render_label"]
