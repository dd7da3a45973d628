"""Shared sample tables: input channels -> expected output channels."""

# unit RGB -> (hue, saturation, value)
samples_rgb_hsv = {
    (1.0, 0.0, 0.0): (0, 1.0, 1.0),
    (0.0, 1.0, 0.0): (120, 1.0, 1.0),
    (0.0, 0.0, 1.0): (240, 1.0, 1.0),
    (1.0, 1.0, 0.0): (60, 1.0, 1.0),
    (0.0, 1.0, 1.0): (180, 1.0, 1.0),
    (1.0, 0.0, 1.0): (300, 1.0, 1.0),
    (1.0, 0.5, 0.0): (30, 1.0, 1.0),
    (0.2, 0.4, 0.6): (210, 2 / 3, 0.6),
    (0.5, 0.25, 0.25): (0, 0.5, 0.5),
    (0.5, 0.5, 0.5): (0, 0.0, 0.5),
    (1.0, 1.0, 1.0): (0, 0.0, 1.0),
    (0.0, 0.0, 0.0): (0, 0.0, 0.0),
}

# unit RGB -> (hue, saturation, luminosity)
samples_rgb_hsl = {
    (1.0, 0.0, 0.0): (0, 1.0, 0.5),
    (0.0, 1.0, 0.0): (120, 1.0, 0.5),
    (0.0, 0.0, 1.0): (240, 1.0, 0.5),
    (1.0, 1.0, 0.0): (60, 1.0, 0.5),
    (1.0, 0.5, 0.0): (30, 1.0, 0.5),
    (0.2, 0.4, 0.6): (210, 0.5, 0.4),
    (0.75, 0.25, 0.25): (0, 0.5, 0.5),
    (0.5, 0.5, 0.5): (0, 0.0, 0.5),
    (1.0, 1.0, 1.0): (0, 0.0, 1.0),
    (0.0, 0.0, 0.0): (0, 0.0, 0.0),
}

# (hue, saturation, value) -> unit RGB
samples_hsv_rgb = {hsv: rgb for rgb, hsv in samples_rgb_hsv.items()}

# (hue, saturation, luminosity) -> unit RGB
samples_hsl_rgb = {hsl: rgb for rgb, hsl in samples_rgb_hsl.items()}

# (hue, saturation, value) -> (hue, saturation, luminosity)
samples_hsv_hsl = {
    (0, 1.0, 1.0): (0, 1.0, 0.5),
    (120, 1.0, 0.5): (120, 1.0, 0.25),
    (210, 2 / 3, 0.6): (210, 0.5, 0.4),
    (60, 0.5, 0.5): (60, 1 / 3, 0.375),
    (0, 0.0, 1.0): (0, 0.0, 1.0),
    (0, 0.0, 0.0): (0, 0.0, 0.0),
}

# (hue, saturation, luminosity) -> (hue, saturation, value)
samples_hsl_hsv = {hsl: hsv for hsv, hsl in samples_hsv_hsl.items()}

# unit RGB -> unit CMYK
samples_rgb_cmyk = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 1.0, 0.0),
    (0.0, 1.0, 0.0): (1.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 1.0): (1.0, 1.0, 0.0, 0.0),
    (0.2, 0.4, 0.6): (2 / 3, 1 / 3, 0.0, 0.4),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.0, 0.5),
    (1.0, 1.0, 1.0): (0.0, 0.0, 0.0, 0.0),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0, 1.0),
}

# unit CMYK -> unit RGB; full key is black whatever the chroma
samples_cmyk_rgb = {cmyk: rgb for rgb, cmyk in samples_rgb_cmyk.items()}
samples_cmyk_rgb[(0.3, 0.6, 0.9, 1.0)] = (0.0, 0.0, 0.0)

# integer RGB triples used for byte-level round trips
samples_rgb_bytes = [
    (0, 0, 0),
    (255, 255, 255),
    (255, 0, 0),
    (0, 255, 0),
    (0, 0, 255),
    (128, 128, 128),
    (161, 131, 114),
    (181, 134, 177),
    (138, 107, 17),
    (1, 7, 20),
    (222, 220, 120),
    (122, 38, 122),
    (177, 128, 92),
    (92, 17, 73),
]
