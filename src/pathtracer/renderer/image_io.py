# renderer/image_io.py
import logging
import os
from typing import TextIO, Union
import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

def format_ppm(pixels: np.ndarray) -> str:
    """
    Formats 8-bit RGB pixels, rows ordered top to bottom, as a plain-text
    PPM (P3) image with one "r g b" line per pixel.
    """
    height, width = pixels.shape[:2]
    lines = [f"P3\n{width} {height}\n255\n"]
    for r, g, b in pixels.reshape(-1, 3).tolist():
        lines.append(f"{r} {g} {b}\n")
    return "".join(lines)

def write_ppm(target: Union[str, os.PathLike, TextIO], pixels: np.ndarray):
    """
    Writes pixels as P3 PPM to a path or an open text stream.
    """
    text = format_ppm(pixels)
    if hasattr(target, "write"):
        target.write(text)
        target.flush()
        return
    with open(target, "w", newline="\n") as f:
        f.write(text)
    logger.info("Wrote %s (%dx%d)", target, pixels.shape[1], pixels.shape[0])

def save_png(path: Union[str, os.PathLike], pixels: np.ndarray):
    """Save the pixels as PNG using Pillow."""
    img = Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8))
    img.save(path)
    logger.info("Wrote %s (%dx%d)", path, pixels.shape[1], pixels.shape[0])
