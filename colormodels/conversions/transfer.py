"""sRGB companding between nonlinear (display) and linear-light RGB."""
import numpy as np
from numpy import ndarray as NDArray


def np_srgb_to_linear(c: NDArray) -> NDArray:
    """Vectorized: Convert nonlinear sRGB (0..1) to linear-light RGB."""
    c = np.asarray(c, dtype=float)
    safe = np.maximum(c, 0.04045)
    return np.where(
        c <= 0.04045,
        c / 12.92,
        ((safe + 0.055) / 1.055) ** 2.4
    )


def np_linear_to_srgb(c: NDArray) -> NDArray:
    """Vectorized: Convert linear-light RGB (0..1) to nonlinear sRGB."""
    c = np.asarray(c, dtype=float)
    # negative linear values stay on the linear segment
    safe = np.maximum(c, 0.0031308)
    return np.where(
        c <= 0.0031308,
        12.92 * c,
        1.055 * (safe ** (1/2.4)) - 0.055
    )
