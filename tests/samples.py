# RGB bytes -> (hue, saturation, lightness)
samples_rgb_hsl = {
    (255, 0, 0): (0.0, 1.0, 0.5),
    (0, 255, 0): (120.0, 1.0, 0.5),
    (0, 0, 255): (240.0, 1.0, 0.5),
    (255, 255, 0): (60.0, 1.0, 0.5),
    (0, 255, 255): (180.0, 1.0, 0.5),
    (255, 0, 255): (300.0, 1.0, 0.5),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (255, 255, 255): (0.0, 0.0, 1.0),
    (128, 128, 128): (0.0, 0.0, 128 / 255),
    (51, 102, 153): (210.0, 0.5, 0.4),
    (255, 128, 64): (60 * 64 / 191, 1.0, 319 / 510),
    (128, 0, 0): (0.0, 1.0, 128 / 510),
    (0, 128, 0): (120.0, 1.0, 128 / 510),
    (191, 64, 191): (300.0, 127 / 255, 0.5),
}

# HSL -> RGB bytes
samples_hsl_rgb = {
    (0.0, 1.0, 0.5): (255, 0, 0),
    (120.0, 1.0, 0.5): (0, 255, 0),
    (240.0, 1.0, 0.5): (0, 0, 255),
    (30.0, 1.0, 0.5): (255, 128, 0),
    (210.0, 0.5, 0.4): (51, 102, 153),
    (0.0, 0.0, 0.5): (128, 128, 128),
    (300.0, 1.0, 0.25): (128, 0, 128),
    (90.0, 1.0, 0.75): (191, 255, 128),
}

# hex input -> normalized 8-digit form
samples_hex = {
    "#fff": "ffffffff",
    "fff": "ffffffff",
    "#F80": "ff8800ff",
    "#f808": "ff880088",
    "#ff8040": "ff8040ff",
    "FF8040": "ff8040ff",
    "#ff804080": "ff804080",
    "#00000000": "00000000",
}

invalid_hex = [
    "",
    "#",
    "#ff",
    "#fffff",
    "#fffffff",
    "#fffffffff",
    "#ggg",
    "#12345z",
    "##fff",
    "# fff",
    "fff ",
]

# WCAG relative luminance of CSS keywords
samples_luminance = {
    "black": 0.0,
    "white": 1.0,
    "red": 0.2126,
    "lime": 0.7152,
    "blue": 0.0722,
}
