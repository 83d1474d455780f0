import math
from typing import Tuple

from boundednumbers import clamp


def unit_rgb_to_hsi(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB to HSI using the trigonometric hue formula.

    Output:
        h in [0, 360)
        s in [0, 1]   (0 for grays, including black)
        i in [0, 1]   (mean of the channels)
    """
    i = (r + g + b) / 3

    # zero only when r == g == b
    denominator = math.sqrt((r - g) ** 2 + (r - b) * (g - b))
    if denominator == 0:
        return 0.0, 0.0, i

    s = 1 - min(r, g, b) / i
    cosine = 0.5 * ((r - g) + (r - b)) / denominator
    theta = math.degrees(math.acos(float(clamp(cosine, -1.0, 1.0))))
    h = theta if b <= g else 360.0 - theta
    if h >= 360.0:
        h = 0.0
    return h, s, i
