# renderer/ppm.py
from typing import TextIO
import numpy as np

MAX_VALUE = 255

def format_ppm(image: np.ndarray) -> str:
    """
    Formats a (height, width, 3) integer image, top row first, as a plain
    text P3 file: one "r g b" line per pixel.
    """
    height, width = image.shape[:2]
    lines = ["P3", f"{width} {height}", str(MAX_VALUE)]
    for r, g, b in image.reshape(-1, 3).tolist():
        lines.append(f"{r} {g} {b}")
    return "\n".join(lines) + "\n"

def write_ppm(image: np.ndarray, stream: TextIO):
    stream.write(format_ppm(image))
