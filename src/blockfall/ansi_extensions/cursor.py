def erase_to_end(text: str = "") -> str:
    """Erase everything from the cursor to the end of the screen."""
    return f"\x1b[0J{text}"


def erase_line_to_end(text: str = "") -> str:
    """Erase everything from the cursor to the end of the current line."""
    return f"\x1b[0K{text}"
