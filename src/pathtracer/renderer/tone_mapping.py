# renderer/tone_mapping.py
import math
import numpy as np
from numba import njit

@njit
def gamma_kernel(accumulated, samples, output):
    height, width, channels = accumulated.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                # Approximate gamma 2: square root of the averaged linear value.
                value = math.sqrt(accumulated[y, x, c] / samples)
                q = int(math.floor(255.99 * value))
                output[y, x, c] = min(255, max(0, q))

def gamma_correct(accumulated, samples):
    """
    Averages a buffer of summed samples, applies gamma 2 correction and
    quantizes every channel to an integer in [0, 255].
    """
    accumulated = np.ascontiguousarray(accumulated, dtype=np.float64)
    output = np.zeros(accumulated.shape, dtype=np.int64)
    gamma_kernel(accumulated, float(samples), output)
    return output
