from ppmkit import BLACK, Color

RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)


def painted(buffer, background=BLACK):
    """Coordinates whose pixel differs from ``background``."""
    return {
        (x, y)
        for y in range(buffer.height)
        for x in range(buffer.width)
        if buffer.get(x, y) != background
    }
