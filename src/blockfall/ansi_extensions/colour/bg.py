def rgb_truecolor(r: int, g: int, b: int) -> str:
    return f"\x1b[48;2;{r};{g};{b}m"


def hex_truecolor(hex_color: str) -> str:
    """Background escape code for a color given as '#RRGGBB'."""
    value = hex_color.removeprefix("#")
    if len(value) != 6:  # noqa: PLR2004
        msg = f"Expected a color of the form '#RRGGBB', got {hex_color!r}"
        raise ValueError(msg)

    r, g, b = (int(value[i : i + 2], 16) for i in (0, 2, 4))
    return rgb_truecolor(r, g, b)
