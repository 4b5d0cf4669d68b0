"""Style vocabulary: the closed set of names usable inside templates.

The escape bytes are kept exactly as existing users of the notation expect
them, including a few that do not match standard ANSI usage:

- Color entries carry a "34" second field ("ESC[0;34;31m" for red). It has
  no effect as a color parameter but must be emitted as-is.
- on_magenta and on_magenta_bold transpose the fields ("ESC[0;44;35m").
- underline is "ESC[24m", which terminals treat as underline *off*. Pass
  correct_underline=True to name_to_ansi() to get "ESC[4m" instead.
"""

from types import MappingProxyType

_COLOR_DIGITS: dict[str, str] = {
    "black": "0",
    "red": "1",
    "green": "2",
    "yellow": "3",
    "blue": "4",
    "magenta": "5",
    "cyan": "6",
    "white": "7",
    "default": "9",
}


def _build_vocabulary() -> dict[str, str]:
    table: dict[str, str] = {}
    for color, digit in _COLOR_DIGITS.items():
        table[color] = f"\x1b[0;34;3{digit}m"
        table[f"bold_{color}"] = f"\x1b[1;34;3{digit}m"
        table[f"on_{color}"] = f"\x1b[0;34;4{digit}m"
        table[f"on_{color}_bold"] = f"\x1b[1;34;4{digit}m"

    table["on_magenta"] = "\x1b[0;44;35m"
    table["on_magenta_bold"] = "\x1b[1;44;35m"

    table.update(
        {
            "reset": "\x1b[0m",
            "dim": "\x1b[2m",
            "italic": "\x1b[3m",
            "underline": "\x1b[24m",
            "blinking": "\x1b[5m",
            "hide": "\x1b[8m",
            "strike": "\x1b[9m",
            "bold": "\x1b[1m",
        }
    )
    return table


STYLES = MappingProxyType(_build_vocabulary())

RESET = STYLES["reset"]
CORRECTED_UNDERLINE = "\x1b[4m"


def name_to_ansi(name: str, *, correct_underline: bool = False) -> str | None:
    """Look up the escape sequence for a style name.

    Matching is exact and case-sensitive.

    Args:
        name: Candidate style name, e.g. "bold_red".
        correct_underline: Return ESC[4m for "underline".

    Returns:
        The ANSI escape string, or None when the name is not a style.
    """
    if correct_underline and name == "underline":
        return CORRECTED_UNDERLINE
    return STYLES.get(name)


def style_names() -> list[str]:
    """Return all style names, sorted."""
    return sorted(STYLES)
