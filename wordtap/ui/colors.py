"""Theme colors and color utilities for the UI."""


class TypingColors:
    """Dark terminal-like palette."""

    BG = "#1e1f22"
    PANEL_BG = "#2b2d31"
    BORDER = "#4e5058"

    TEXT_PRIMARY = "#f2f3f5"
    TEXT_MUTED = "#949ba4"

    CORRECT = "#57d17a"
    WRONG = "#f25f5c"
    FOCUS = "#4fd1e0"


def faded(color: str, amount: float, toward: str = TypingColors.BG) -> str:
    """Mix a #RRGGBB ``color`` into ``toward`` (the window background by default).

    ``amount`` 0 keeps the color, 1 reaches ``toward``. Anything that is not a
    six-digit hex color comes back unchanged.
    """
    try:
        src = bytes.fromhex(color.lstrip("#"))
        dst = bytes.fromhex(toward.lstrip("#"))
    except ValueError:
        return color
    if len(src) != 3 or len(dst) != 3:
        return color
    amount = max(0.0, min(1.0, amount))
    if amount == 0.0:
        return color
    mixed = bytes(int(s + (d - s) * amount) for s, d in zip(src, dst))
    return "#" + mixed.hex().upper()
