# renderer/tone_mapping.py
import math
import numpy as np
from numba import njit

# Largest channel value before scaling; 0.999 * 256 truncates to 255.
CLAMP_MAX = 0.999

@njit(cache=True)
def quantize_kernel(accumulated, samples_per_pixel, output):
    height, width, channels = accumulated.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                value = accumulated[y, x, c] / samples_per_pixel
                if value < 0.0:
                    value = 0.0
                value = math.sqrt(value)
                if value > CLAMP_MAX:
                    value = CLAMP_MAX
                output[y, x, c] = int(256.0 * value)

def gamma_quantize(accumulated: np.ndarray, samples_per_pixel: int) -> np.ndarray:
    """
    Turn a buffer of summed sample colours into 8-bit pixels.

    Each channel is averaged over samples_per_pixel, gamma corrected with a
    square root, clamped to [0, 0.999], scaled by 256 and truncated.
    """
    if samples_per_pixel <= 0:
        raise ValueError(f"samples_per_pixel must be positive, got {samples_per_pixel}")
    accumulated = np.ascontiguousarray(accumulated, dtype=np.float64)
    if accumulated.ndim != 3 or accumulated.shape[2] != 3:
        raise ValueError(f"expected an (height, width, 3) buffer, got shape {accumulated.shape}")
    output = np.zeros(accumulated.shape, dtype=np.uint8)
    quantize_kernel(accumulated, float(samples_per_pixel), output)
    return output
