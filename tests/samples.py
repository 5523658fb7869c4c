# Shared sample tables. Integer HSV/HSL components are whole degrees/percents.

samples_hex_rgb = {
    "#ff0000": (255, 0, 0),
    "#00ff00": (0, 255, 0),
    "#0000ff": (0, 0, 255),
    "#ffffff": (255, 255, 255),
    "#000000": (0, 0, 0),
    "#808080": (128, 128, 128),
    "#336699": (51, 102, 153),
    "#ff8000": (255, 128, 0),
}

samples_hex_hsl = {
    "#ff0000": (0, 100, 50),
    "#00ff00": (120, 100, 50),
    "#0000ff": (240, 100, 50),
    "#ffffff": (0, 0, 100),
    "#000000": (0, 0, 0),
    "#808080": (0, 0, 50),
    "#336699": (210, 50, 40),
    "#ff8000": (30, 100, 50),
    "#800080": (300, 100, 25),
}

samples_hex_hsv = {
    "#ff0000": (0, 100, 100),
    "#00ff00": (120, 100, 100),
    "#0000ff": (240, 100, 100),
    "#ffffff": (0, 0, 100),
    "#000000": (0, 0, 0),
    "#808080": (0, 0, 50),
    "#336699": (210, 67, 60),
}

samples_hex_cmyk = {
    "#000000": (0, 0, 0, 100),
    "#ffffff": (0, 0, 0, 0),
    "#ff0000": (0, 100, 100, 0),
    "#00ff00": (100, 0, 100, 0),
    "#336699": (67, 33, 0, 40),
}

samples_hex_lab = {
    "#ffffff": (100.0, 0.0, 0.0),
    "#000000": (0.0, 0.0, 0.0),
    "#ff0000": (53.24, 80.09, 67.2),
    "#00ff00": (87.73, -86.18, 83.18),
    "#0000ff": (32.3, 79.2, -107.86),
}

samples_hex_oklch = {
    "#ffffff": (1.0, 0.0, 0.0),
    "#000000": (0.0, 0.0, 0.0),
    "#ff0000": (0.628, 0.258, 29.2),
    "#0000ff": (0.452, 0.313, 264.1),
}

samples_css_rgb = {
    "rgb(255, 0, 0)": "#ff0000",
    "rgb(0,128,255)": "#0080ff",
    "RGB(0, 128, 255)": "#0080ff",
    "rgb(0 128 255)": "#0080ff",
    "rgba(255, 0, 0, 0.5)": "#ff000080",
    "rgb(255 0 0 / 0.5)": "#ff000080",
    "rgba(0, 0, 255, 1)": "#0000ff",
    "rgba(0, 0, 0, 0)": "#00000000",
}

samples_css_hsl = {
    "hsl(0, 100%, 50%)": "#ff0000",
    "hsl(120, 100%, 50%)": "#00ff00",
    "hsl(120 100% 50%)": "#00ff00",
    "hsl(210, 50%, 40%)": "#336699",
    "hsla(0, 100%, 50%, 0.5)": "#ff000080",
    "hsl(240 100% 50% / 0.5)": "#0000ff80",
    "HSL(0, 0%, 100%)": "#ffffff",
}

# Inputs accepted by the parser, with their canonical hex
samples_parse = {
    "red": "#ff0000",
    "RED": "#ff0000",
    "  Blue ": "#0000ff",
    "grey": "#808080",
    "rebeccapurple": "#663399",
    "transparent": "#00000000",
    "#FFF": "#ffffff",
    "#f008": "#ff000088",
    "#336699": "#336699",
    "#FF000080": "#ff000080",
    "rgb(0, 128, 255)": "#0080ff",
    "rgba(255, 0, 0, 0.5)": "#ff000080",
    "hsl(120 100% 50%)": "#00ff00",
    "hsla(0, 100%, 50%, 0.5)": "#ff000080",
}

sample_hexes = [
    "#ff0000",
    "#00ff00",
    "#0000ff",
    "#ffffff",
    "#000000",
    "#808080",
    "#336699",
    "#ff8000",
    "#800080",
    "#12ab34",
]
