# RGB (0-255) -> HSL (0-1), proportional model (default)
samples_rgb_hsl = {
    (255, 0, 0): (0.0, 1.0, 0.5),
    (0, 255, 0): (1 / 3, 1.0, 0.5),
    (0, 0, 255): (2 / 3, 1.0, 0.5),
    (255, 255, 0): (1 / 6, 1.0, 0.5),
    (255, 0, 255): (5 / 6, 1.0, 0.5),
    (255, 255, 255): (0.0, 0.0, 1.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (128, 128, 128): (0.0, 0.0, 128 / 255),
    (175, 103, 31): (30 / 360, 144 / 206, 206 / 510),
    (102, 153, 204): (210 / 360, 1 / 3, 0.6),
    (230, 240, 250): (210 / 360, 20 / 480, 480 / 510),
}

# RGB (0-255) -> HSL (0-1), CSS Color 4 model
samples_rgb_hsl_css = {
    (255, 0, 0): (0.0, 1.0, 0.5),
    (255, 255, 255): (0.0, 0.0, 1.0),
    (175, 103, 31): (30 / 360, 144 / 206, 206 / 510),
    (102, 153, 204): (210 / 360, 0.5, 0.6),
    (230, 240, 250): (210 / 360, 2 / 3, 480 / 510),
}

samples_hex_rgb = {
    "#ff0000": (255, 0, 0),
    "#FF0000": (255, 0, 0),
    "FF0000": (255, 0, 0),
    "#6699cc": (102, 153, 204),
    "#af671f": (175, 103, 31),
    "000000": (0, 0, 0),
    "#FfFfFf": (255, 255, 255),
}

rgb_grid = [
    (r, g, b)
    for r in (0, 31, 64, 127, 128, 200, 255)
    for g in (0, 17, 99, 128, 254, 255)
    for b in (0, 1, 50, 128, 210, 255)
]
