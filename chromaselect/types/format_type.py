from enum import Enum
import numpy as np


class FormatType(str, Enum):
    INT = "int"
    FLOAT = "float"


BYTE_MAX = 255
HUE_360 = 360

max_non_hue = {
    FormatType.INT: BYTE_MAX,
    FormatType.FLOAT: 1.0,
}

default_format_dtypes = {
    FormatType.INT: np.int64,
    FormatType.FLOAT: np.float64,
}
