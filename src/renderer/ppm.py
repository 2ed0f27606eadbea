# renderer/ppm.py
from pathlib import Path
from typing import TextIO, Union
import numpy as np

def format_ppm(image: np.ndarray) -> str:
    """
    Plain-text (P3) pixmap of an (height, width, 3) uint8 image: a header of
    "P3", "<width> <height>" and "255", then one "R G B" line per pixel in
    row-major order from the top-left pixel.
    """
    height, width = image.shape[:2]
    lines = ["P3", f"{width} {height}", "255"]
    for r, g, b in image.reshape(-1, 3).tolist():
        lines.append(f"{r} {g} {b}")
    return "\n".join(lines) + "\n"

def write_ppm(image: np.ndarray, out: Union[str, Path, TextIO]) -> None:
    """Write the image to a path or an open text stream."""
    text = format_ppm(image)
    if isinstance(out, (str, Path)):
        with open(out, "w", newline="\n") as f:
            f.write(text)
    else:
        out.write(text)
