"""UI Widgets"""
from .number_input import draw_prompt_line, draw_input_line, draw_cancelled

__all__ = [
    'draw_prompt_line',
    'draw_input_line',
    'draw_cancelled',
]
