"""Path parameter converters.

Each converter is a regex a captured segment must satisfy, e.g. the
``int`` in ``{id:int}``. Values are never converted; the gate and the
matcher only ask whether a segment fits.
"""

import re
from functools import cache

CONVERTERS: dict[str, str] = {
    "str": r"[^/]+",
    "int": r"\d+",
    "float": r"\d+(?:\.\d+)?",
    "path": r".+",
}


@cache
def param_pattern(param_type: str) -> re.Pattern[str]:
    """Return the anchored regex for a converter.

    Raises ``KeyError`` if *param_type* is not a registered converter.
    """
    return re.compile(f"^{CONVERTERS[param_type]}$")
