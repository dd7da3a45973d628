from .format_type import FormatType, max_non_hue, HUE_360, BYTE_MAX
from .color_types import ColorSpace, HUE_SPACES, as_color_space, is_hue_space

__all__ = [
    'FormatType',
    'max_non_hue',
    'HUE_360',
    'BYTE_MAX',
    'ColorSpace',
    'HUE_SPACES',
    'as_color_space',
    'is_hue_space',
]
