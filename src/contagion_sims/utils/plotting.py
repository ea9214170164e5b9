from matplotlib import colors
import numpy as np


def color_to_rgb(color: str | tuple | None) -> tuple[float, float, float] | None:
    if color is None:
        return None
    return tuple(float(c) for c in colors.to_rgb(color))


def lighten(base_color, amount: float = 0.3) -> tuple[float, float, float]:
    """Blend a colour towards white, e.g. for frozen subjects."""
    base = np.array(color_to_rgb(base_color), dtype=float)
    white = np.ones(3, dtype=float)
    return tuple(white * amount + base * (1 - amount))
