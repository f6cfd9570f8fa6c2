"""
Sharpness measurement for single frames.

Edge detection follows the OpenCV Laplace operator tutorial:
https://docs.opencv.org/3.4/d5/db5/tutorial_laplace_operator.html

The frame is smoothed, converted to gray and filtered with a Laplacian. The
maximum of the signed response is the sharpness score. Only the positive peak
is used; strong negative responses do not raise the score. Existing result
files depend on this, so keep it.
"""

from __future__ import annotations

from pathlib import Path

import cv2
import numpy as np

from ..core.errors import ImageDecodeError

# Noise suppression before edge detection; sigma 0 lets OpenCV derive it from the kernel size
BLUR_KERNEL_SIZE = (3, 3)
BLUR_SIGMA = 0

# Laplacian: 16-bit signed output so second derivatives of 8-bit input do not clip
LAPLACIAN_DEPTH = cv2.CV_16S
LAPLACIAN_KERNEL_SIZE = 3
LAPLACIAN_SCALE = 1
LAPLACIAN_DELTA = 0
LAPLACIAN_BORDER = cv2.BORDER_REPLICATE


def read_image(path: Path) -> np.ndarray:
    """Load an image as a BGR array.

    Args:
        path (Path): Image file to decode.

    Returns:
        np.ndarray: Decoded pixels.

    Raises:
        ImageDecodeError: The file cannot be read, cannot be decoded or has no pixels.
    """
    # cv2.imread takes a str path and cannot cope with names that are not valid UTF-8
    try:
        data = np.fromfile(path, dtype=np.uint8)
    except OSError as ex:
        raise ImageDecodeError(path) from ex
    if data.size == 0:
        raise ImageDecodeError(path)

    image = cv2.imdecode(data, cv2.IMREAD_COLOR)
    if image is None or image.shape[0] == 0 or image.shape[1] == 0:
        raise ImageDecodeError(path)
    return image


def to_gray(image: np.ndarray) -> np.ndarray:
    """Return a single-channel version of ``image``."""
    if image.ndim == 2:
        return image
    channels = image.shape[2]
    if channels == 1:
        return image[:, :, 0]
    if channels == 4:
        return cv2.cvtColor(image, cv2.COLOR_BGRA2GRAY)
    return cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)


def compute_sharpness(image: np.ndarray) -> float:
    """Return the sharpness score of a decoded frame.

    Args:
        image (np.ndarray): BGR, BGRA or gray frame.

    Returns:
        float: Maximum Laplacian response; higher values mean sharper frames.
    """
    if image.size == 0:
        raise ValueError("cannot compute sharpness of an empty image")

    blurred = cv2.GaussianBlur(image, BLUR_KERNEL_SIZE, BLUR_SIGMA, BLUR_SIGMA, cv2.BORDER_DEFAULT)
    gray = to_gray(blurred)

    response = cv2.Laplacian(
        gray,
        LAPLACIAN_DEPTH,
        ksize=LAPLACIAN_KERNEL_SIZE,
        scale=LAPLACIAN_SCALE,
        delta=LAPLACIAN_DELTA,
        borderType=LAPLACIAN_BORDER,
    )

    _, max_val, _, _ = cv2.minMaxLoc(response)
    return float(max_val)


def calculate_sharpness(path: Path) -> float:
    """Read the image at ``path`` and return its sharpness."""
    return compute_sharpness(read_image(path))
