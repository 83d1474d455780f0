from typing import Tuple


def unit_rgb_to_cmyk(r: float, g: float, b: float) -> Tuple[float, float, float, float]:
    """
    Convert unit RGB to unit CMYK with full black extraction.

    Pure black has no chromatic ink: (0, 0, 0, 1).
    """
    k = 1 - max(r, g, b)
    if k == 1:
        return 0.0, 0.0, 0.0, 1.0
    c = (1 - r - k) / (1 - k)
    m = (1 - g - k) / (1 - k)
    y = (1 - b - k) / (1 - k)
    return c, m, y, k
