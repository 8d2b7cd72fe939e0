# Expected values shared by the conversion and color tests.
# RGB keys are 0-255 channels; unit values are in [0, 1].

samples_rgb_hsl = {
    (255, 0, 0): (0, 1.0, 0.5),
    (0, 255, 0): (120, 1.0, 0.5),
    (0, 0, 255): (240, 1.0, 0.5),
    (255, 255, 0): (60, 1.0, 0.5),
    (0, 255, 255): (180, 1.0, 0.5),
    (255, 0, 255): (300, 1.0, 0.5),
    (255, 255, 255): (0, 0.0, 1.0),
    (0, 0, 0): (0, 0.0, 0.0),
    (128, 128, 128): (0, 0.0, 128 / 255),
    (0, 128, 128): (180, 1.0, 64 / 255),
    (161, 110, 87): (18.648649, 74 / 248, 124 / 255),
}

samples_rgb_hsv = {
    (255, 0, 0): (0, 1.0, 1.0),
    (0, 255, 0): (120, 1.0, 1.0),
    (0, 0, 255): (240, 1.0, 1.0),
    (255, 255, 0): (60, 1.0, 1.0),
    (0, 255, 255): (180, 1.0, 1.0),
    (255, 0, 255): (300, 1.0, 1.0),
    (255, 255, 255): (0, 0.0, 1.0),
    (0, 0, 0): (0, 0.0, 0.0),
    (0, 128, 128): (180, 1.0, 128 / 255),
    (255, 128, 64): (20.104712, 191 / 255, 1.0),
    (161, 110, 87): (18.648649, 74 / 161, 161 / 255),
}

samples_rgb_hwb = {
    (255, 0, 0): (0, 0.0, 0.0),
    (0, 128, 128): (180, 0.0, 127 / 255),
    (255, 255, 255): (0, 1.0, 0.0),
    (0, 0, 0): (0, 0.0, 1.0),
    (161, 110, 87): (18.648649, 87 / 255, 94 / 255),
}

samples_rgb_hsi = {
    (255, 0, 0): (0, 1.0, 1 / 3),
    (0, 255, 0): (120, 1.0, 1 / 3),
    (0, 0, 255): (240, 1.0, 1 / 3),
    (0, 128, 128): (180, 1.0, 256 / 765),
    (255, 255, 255): (0, 0.0, 1.0),
    (0, 0, 0): (0, 0.0, 0.0),
}

samples_rgb_cmyk = {
    (255, 0, 0): (0.0, 1.0, 1.0, 0.0),
    (0, 128, 128): (1.0, 0.0, 0.0, 127 / 255),
    (255, 255, 255): (0.0, 0.0, 0.0, 0.0),
    (0, 0, 0): (0.0, 0.0, 0.0, 1.0),
    (161, 110, 87): (0.0, 51 / 161, 74 / 161, 94 / 255),
}

samples_rgb_xyz = {
    (255, 0, 0): (0.757088, 0.596903, 0.260887),
    (255, 255, 255): (1.0, 1.0, 1.0),
    (0, 0, 0): (4 / 29, 4 / 29, 4 / 29),
}

samples_rgb_lab = {
    (255, 0, 0): (53.24, 80.09, 67.20),
    (255, 255, 255): (100.0, 0.0, 0.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
}

samples_rgb_ycbcr = {
    (255, 255, 255): (255.0, 128.0, 128.0),
    (0, 0, 0): (0.0, 128.0, 128.0),
    (255, 255, 0): (225.93, 0.57548, 148.72691),
}

samples_rgb_yuv = {
    (255, 255, 255): (1.0, 0.0, 0.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (255, 0, 0): (0.299, -0.147108, 0.614777),
}

# A spread of colors for round trips, including off-axis ones.
round_trip_rgb = [
    (255, 0, 0),
    (0, 255, 0),
    (0, 0, 255),
    (255, 255, 255),
    (0, 0, 0),
    (0, 128, 128),
    (161, 110, 87),
    (42, 42, 42),
    (255, 128, 64),
    (12, 200, 97),
    (240, 248, 255),
    (102, 51, 153),
]

# Grays and hues a hair below 360, where rounding wraps the hue to 0
edge_rgb = [
    (1, 1, 1),
    (42, 42, 42),
    (128, 128, 128),
    (178, 178, 178),
    (254, 254, 254),
    (255, 0, 1),
    (200, 100, 101),
    (201, 100, 102),
    (250, 3, 5),
]
