import numpy as np


def rgb(r, g, b):
    """Build a read-only color with unclamped float channels."""
    color = np.array((r, g, b), dtype=float)
    color.flags.writeable = False
    return color


BLACK = rgb(0.0, 0.0, 0.0)


def add_color(total, color):
    """Accumulate a contribution; a total of None means no color yet."""
    if total is None:
        return np.array(color, dtype=float)
    return total + color


def clamp_color(color):
    """Clamp color components to [0, 1]."""
    return np.clip(color, 0.0, 1.0)


def to_bytes(color):
    """Convert float channels to 0-255 bytes, truncating like an integer cast."""
    return (clamp_color(color) * 255.0).astype(np.uint8)
