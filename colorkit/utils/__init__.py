from .num_utils import clamp, format_number, is_close_to_int, round_half_up, round_to_int

__all__ = [
    "clamp",
    "format_number",
    "is_close_to_int",
    "round_half_up",
    "round_to_int",
]
