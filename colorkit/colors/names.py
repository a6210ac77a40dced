from types import MappingProxyType
from typing import Mapping, Optional

import webcolors

from ..errors import NameNotFoundError

# Added by CSS Color Level 4; webcolors' CSS3 table predates it
LEVEL_4_NAMES = {"rebeccapurple": "#663399"}


def _build_table() -> Mapping[str, str]:
    table = {
        name: webcolors.name_to_hex(name, spec=webcolors.CSS3)
        for name in webcolors.names(webcolors.CSS3)
    }
    for name, value in LEVEL_4_NAMES.items():
        table.setdefault(name, value)
    return MappingProxyType(table)


# name -> lowercase "#rrggbb", in webcolors' CSS3 table order, then Level 4 additions
NAMED_COLORS: Mapping[str, str] = _build_table()

COLOR_NAMES = tuple(NAMED_COLORS)


def hex_for_name(name: str) -> str:
    """
    Look up a color name (exact, case-sensitive).

    Raises:
        NameNotFoundError: if the name is not in the table
    """
    try:
        return NAMED_COLORS[name]
    except KeyError:
        raise NameNotFoundError(name) from None


def name_for_hex(hex_string: str) -> Optional[str]:
    """First color name whose hex value matches ``hex_string``, ignoring case."""
    target = hex_string.lower()
    for name, value in NAMED_COLORS.items():
        if value.lower() == target:
            return name
    return None
