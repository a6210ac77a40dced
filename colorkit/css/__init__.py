from .format import format_color, format_function, format_hex, format_hue
from .parse import deprecated_syntax, parse_color, parse_function, parse_hex, parse_hue, split_arguments

__all__ = [
    "deprecated_syntax",
    "format_color",
    "format_function",
    "format_hex",
    "format_hue",
    "parse_color",
    "parse_function",
    "parse_hex",
    "parse_hue",
    "split_arguments",
]
