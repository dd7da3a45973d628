from chromaselect.colors import Color
from ..samples import samples_rgb_bytes


def _close(a, b, tolerance):
    return all(abs(x - y) <= tolerance for x, y in zip(a, b))


def test_rgb_through_float_spaces_is_exact():
    for rgb in samples_rgb_bytes:
        color = Color.new_rgb(*rgb)
        assert color.to_rgb_float().to_rgb().value == rgb
        assert color.to_cmyk_float().to_rgb().value == rgb


def test_rgb_through_hue_spaces_is_close():
    # hue is stored in whole degrees
    for rgb in samples_rgb_bytes:
        color = Color.new_rgb(*rgb)
        assert _close(color.to_hsv().to_rgb().value, rgb, 3)
        assert _close(color.to_hsl().to_rgb().value, rgb, 3)


def test_rgb_through_integer_cmyk_is_close():
    for rgb in samples_rgb_bytes:
        color = Color.new_rgb(*rgb)
        assert _close(color.to_cmyk().to_rgb().value, rgb, 2)


def test_hsv_hsl_hsv_keeps_hue():
    for rgb in samples_rgb_bytes:
        hsv = Color.new_rgb(*rgb).to_hsv()
        assert hsv.to_hsl().to_hsv().hue() == hsv.hue()


HSL_SOURCES = [(0, 1.0, 0.5), (45, 0.3, 0.7), (200, 0.8, 0.25), (333, 0.5, 0.6), (120, 0.25, 0.1), (270, 1.0, 0.9)]
HSV_SOURCES = [(0, 1.0, 1.0), (45, 0.3, 0.7), (200, 0.8, 0.25), (333, 0.5, 0.6), (90, 1.0, 0.05), (359, 0.9, 0.9)]
RGB_FLOAT_SOURCES = [(0.2, 0.4, 0.6), (1.0, 0.0, 0.5), (0.01, 0.99, 0.3), (0.75, 0.75, 0.1), (0.0, 0.0, 0.0)]
# min(c, m, y) == 0, so the key is recoverable
CMYK_FLOAT_SOURCES = [(0.0, 0.5, 0.25, 0.2), (0.7, 0.0, 1.0, 0.5), (0.3, 0.9, 0.0, 0.0), (0.0, 0.0, 0.0, 0.6)]


def test_hsl_through_rgb_float():
    for hsl in HSL_SOURCES:
        back = Color.new_hsl(*hsl).to_rgb_float().to_hsl().value
        assert back[0] == hsl[0]
        assert _close(back[1:], hsl[1:], 1e-9)


def test_hsv_through_rgb_float():
    for hsv in HSV_SOURCES:
        back = Color.new_hsv(*hsv).to_rgb_float().to_hsv().value
        assert back[0] == hsv[0]
        assert _close(back[1:], hsv[1:], 1e-9)


def test_hsv_through_cmyk_float():
    for hsv in HSV_SOURCES:
        back = Color.new_hsv(*hsv).to_cmyk_float().to_hsv().value
        assert back[0] == hsv[0]
        assert _close(back[1:], hsv[1:], 1e-9)


def test_rgb_float_through_cmyk_float():
    for rgb in RGB_FLOAT_SOURCES:
        back = Color.new_rgb_float(*rgb).to_cmyk_float().to_rgb_float().value
        assert _close(back, rgb, 1e-9)


def test_rgb_float_through_hue_spaces():
    for rgb in RGB_FLOAT_SOURCES:
        color = Color.new_rgb_float(*rgb)
        # half a degree of hue moves a channel by at most 1/120
        assert _close(color.to_hsv().to_rgb_float().value, rgb, 1 / 120 + 1e-9)
        assert _close(color.to_hsl().to_rgb_float().value, rgb, 1 / 120 + 1e-9)


def test_cmyk_float_through_rgb_float():
    for cmyk in CMYK_FLOAT_SOURCES:
        back = Color.new_cmyk_float(*cmyk).to_rgb_float().to_cmyk_float().value
        assert _close(back, cmyk, 1e-9)


def test_tiny_channels_convert_everywhere():
    sources = [
        Color.new_rgb_float(1e-10, 0.0, 0.0),
        Color.new_rgb_float(1e-300, 0.0, 0.0),
        Color.new_rgb_float(0.0, 6.8e-13, 1e-300),
        Color.new_cmyk_float(0.5, 1.0, 0.999999999999, 0.9999999999999999),
        Color.new_hsl(244, 1.0, 6.46e-10),
        Color.new_hsv(18, 0.999999999999, 2.3e-15),
        Color.new_rgb_float(1.0, 1.0, 1.0 - 1e-12),
    ]
    for color in sources:
        for space in ("rgb", "cmyk"):
            for fmt in ("int", "float"):
                color.convert(space, fmt)
        color.to_hsl()
        color.to_hsv()


def test_near_black_values():
    cmyk = Color.new_rgb_float(1e-10, 0.0, 0.0).to_cmyk_float()
    assert cmyk.value[:3] == (0.0, 1.0, 1.0)

    hsl = Color.new_rgb_float(1e-300, 0.0, 0.0).to_hsl()
    assert hsl.value[:2] == (0, 1.0)
    assert Color.new_rgb_float(0.0, 6.8e-13, 1e-300).to_hsl().value[:2] == (120, 1.0)
    assert Color.new_cmyk_float(0.5, 1.0, 0.999999999999, 0.9999999999999999).saturation_hsl() == 1.0

    assert Color.new_hsl(244, 1.0, 6.46e-10).key_black() == 255
    assert Color.new_hsv(18, 0.999999999999, 2.3e-15).to_cmyk().value[3] == 255
