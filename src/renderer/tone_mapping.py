# renderer/tone_mapping.py
import numpy as np


def linear_to_srgb_image(accumulated: np.ndarray) -> np.ndarray:
    """
    Encode a linear radiance buffer (..., 3) as 8-bit sRGB.
    Values are clipped to [0, 1] before encoding.
    """
    linear = np.clip(np.asarray(accumulated, dtype=np.float64), 0.0, 1.0)
    encoded = np.where(
        linear <= 0.0031308,
        linear * 12.92,
        1.055 * np.power(linear, 1.0 / 2.4) - 0.055,
    )
    return np.round(encoded * 255).clip(0, 255).astype("uint8")


def reinhard_tone_mapping(accumulated, exposure=1.0, white_point=1.0):
    """
    Apply Reinhard tone mapping to a linear radiance image, then sRGB-encode it.
    """
    scaled = np.asarray(accumulated, dtype=np.float64) * exposure
    mapped = scaled / (1.0 + scaled / white_point)
    return linear_to_srgb_image(mapped)
