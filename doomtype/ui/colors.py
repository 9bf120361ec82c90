"""Terminal palette and color utilities."""


class Theme:
    """Dark terminal palette."""

    BACKGROUND = "#030712"
    PANEL = "#060913"
    PANEL_MUTED = "#090b12"
    BORDER = "#1f2a37"

    TEXT = "#e2e8f0"
    TEXT_DIM = "#94a3b8"

    ACCENT = "#38bdf8"
    SUCCESS = "#7fd18d"
    ERROR = "#f87171"

    # Cursor cell: dark glyph on the accent color
    CURSOR_TEXT = "#020617"


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b."""
    a = a.strip()
    b = b.strip()
    if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
        return a
    try:
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
    except ValueError:
        return a
    t = max(0.0, min(1.0, float(t)))
    r = int(ar + (br - ar) * t)
    g = int(ag + (bg - ag) * t)
    bl = int(ab + (bb - ab) * t)
    return f"#{r:02X}{g:02X}{bl:02X}"


def accuracy_color(accuracy: float) -> str:
    """Fade from the error color at 0% to the success color at 100%."""
    return blend_hex(Theme.ERROR, Theme.SUCCESS, accuracy / 100.0)
