import numpy as np
from typing import Callable, Dict, Tuple, Union

from ..types.format_type import FormatType, max_non_hue, default_format_dtypes, HUE_360
from ..types.color_types import ColorSpace, as_color_space, HUE_SPACES

from .numbers import np_require_unit, np_round_half_up
from .to_rgb import np_hsv_to_unit_rgb, np_hsl_to_unit_rgb, np_cmyk_to_unit_rgb
from .to_hsv import np_unit_rgb_to_hsv, np_hsl_to_hsv
from .to_hsl import np_unit_rgb_to_hsl, np_hsv_to_hsl
from .to_cmyk import np_unit_rgb_to_cmyk

NUM_CHANNELS: Dict[ColorSpace, int] = {
    ColorSpace.RGB: 3,
    ColorSpace.HSV: 3,
    ColorSpace.HSL: 3,
    ColorSpace.CMYK: 4,
}

# Every space reaches unit RGB, and unit RGB reaches every space
TO_UNIT_RGB: Dict[ColorSpace, Callable[..., np.ndarray]] = {
    ColorSpace.HSV: np_hsv_to_unit_rgb,
    ColorSpace.HSL: np_hsl_to_unit_rgb,
    ColorSpace.CMYK: np_cmyk_to_unit_rgb,
}

FROM_UNIT_RGB: Dict[ColorSpace, Callable[..., np.ndarray]] = {
    ColorSpace.HSV: np_unit_rgb_to_hsv,
    ColorSpace.HSL: np_unit_rgb_to_hsl,
    ColorSpace.CMYK: np_unit_rgb_to_cmyk,
}

# Direct conversions that skip the RGB hub
CONVERT_NUMPY_DIRECT: Dict[Tuple[ColorSpace, ColorSpace], Callable[..., np.ndarray]] = {
    (ColorSpace.HSV, ColorSpace.HSL): np_hsv_to_hsl,
    (ColorSpace.HSL, ColorSpace.HSV): np_hsl_to_hsv,
}


def normalize(color: np.ndarray, space: ColorSpace, fmt: FormatType) -> np.ndarray:
    maxval = max_non_hue[fmt]

    if space in HUE_SPACES:
        h = color[..., 0]
        rest = np_require_unit(color[..., 1:] / maxval, space.value)
        return np.concatenate([h[..., np.newaxis], rest], axis=-1)

    return np_require_unit(color / maxval, space.value)


def scale(color: np.ndarray, space: ColorSpace, fmt: FormatType) -> np.ndarray:
    maxval = max_non_hue[fmt]

    if space in HUE_SPACES:
        h = np_round_half_up(color[..., 0]) % HUE_360
        rest = color[..., 1:] * maxval
        if fmt == FormatType.INT:
            rest = np_round_half_up(rest)
        return np.concatenate([h[..., np.newaxis], rest], axis=-1).astype(default_format_dtypes[fmt])

    scaled = color * maxval
    if fmt == FormatType.INT:
        scaled = np_round_half_up(scaled)
    return scaled.astype(default_format_dtypes[fmt])


def _split(color: np.ndarray):
    return tuple(color[..., i] for i in range(color.shape[-1]))


def _convert_core(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
    input_fmt: FormatType,
    output_fmt: FormatType,
) -> np.ndarray:
    if color.shape[-1] != NUM_CHANNELS[from_space]:
        raise ValueError(
            f"{from_space.value} expects last dimension to be {NUM_CHANNELS[from_space]}, "
            f"got shape {color.shape}"
        )

    # normalize → convert → scale
    base_norm = normalize(color, from_space, input_fmt)

    if from_space == to_space:
        converted = base_norm
    elif (from_space, to_space) in CONVERT_NUMPY_DIRECT:
        converted = CONVERT_NUMPY_DIRECT[(from_space, to_space)](*_split(base_norm))
    else:
        if from_space == ColorSpace.RGB:
            rgb = base_norm
        else:
            rgb = TO_UNIT_RGB[from_space](*_split(base_norm))
        if to_space == ColorSpace.RGB:
            converted = rgb
        else:
            converted = FROM_UNIT_RGB[to_space](*_split(rgb))

    return scale(converted, to_space, output_fmt)


def np_convert(
    color: np.ndarray,
    from_space: Union[ColorSpace, str],
    to_space: Union[ColorSpace, str],
    input_type: Union[FormatType, str] = FormatType.INT,
    output_type: Union[FormatType, str] = FormatType.INT,
) -> np.ndarray:
    """
    Convert an array of colors between spaces and formats.

    Args:
        color: Array whose last axis holds the channels of ``from_space``
        from_space, to_space: "rgb", "hsv", "hsl" or "cmyk"
        input_type, output_type: "int" (bytes) or "float" (unit interval);
            hue is always expressed in whole degrees

    Returns:
        Array whose last axis holds the channels of ``to_space``

    Raises:
        OutOfRangeError: if any non-hue channel is outside its range
        ValueError: for unknown spaces or mismatched channel counts
    """
    return _convert_core(
        np.asarray(color, dtype=float),
        as_color_space(from_space),
        as_color_space(to_space),
        FormatType(input_type),
        FormatType(output_type),
    )
