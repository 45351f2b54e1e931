"""Theme colors and color utilities for the UI."""


class TutorColors:
    """Light theme palette."""

    BG_TOP = "#e0f7fa"
    BG_BOTTOM = "#80deea"

    PRIMARY = "#00838f"
    PRIMARY_LIGHT = "#4fb3bf"
    PRIMARY_DARK = "#005662"

    CORAL = "#ff8a65"
    AMBER = "#ffb74d"
    LAVENDER = "#b39ddb"

    CARD_BG = "rgba(255, 255, 255, 0.85)"

    TEXT_PRIMARY = "#1a3a3a"
    TEXT_SECONDARY = "#4a6572"
    TEXT_MUTED = "#78909c"

    # Current word segments
    CHAR_CORRECT = "#1e66f5"
    CHAR_INCORRECT = "#d20f39"
    CHAR_UNTYPED = "#1a3a3a"
    CHAR_DONE = "#90a4ae"

    KEY_FILL = "#f8fcfd"
    KEY_BORDER = "#b0bec5"
    KEY_PRESSED = "#ef5350"

    # Sparkline bars run from fast (teal) to slow (deep orange)
    SPARK_FAST = "#26a69a"
    SPARK_SLOW = "#ff7043"


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b."""
    try:
        a = a.strip()
        b = b.strip()
        if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
            return a
        t = max(0.0, min(1.0, float(t)))
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
        r = int(ar + (br - ar) * t)
        g = int(ag + (bg - ag) * t)
        bl = int(ab + (bb - ab) * t)
        return f"#{r:02X}{g:02X}{bl:02X}"
    except (TypeError, ValueError):
        return a
