# Upper hue bound (exclusive) of each band
_HUE_NAMES = (
    (15, "red"),
    (45, "orange"),
    (75, "yellow"),
    (105, "yellow-green"),
    (135, "green"),
    (165, "teal"),
    (195, "cyan"),
    (225, "blue"),
    (255, "indigo"),
    (285, "purple"),
    (315, "magenta"),
    (345, "pink"),
)


def get_color_name_en(hue: float) -> str:
    """
    Coarse English name for a hue, for screen reader labels.

    >>> get_color_name_en(120)
    'green'
    >>> get_color_name_en(350)
    'red'
    """
    for upper, name in _HUE_NAMES:
        if hue < upper:
            return name
    return "red"
