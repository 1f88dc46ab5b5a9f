"""Line splitting for layout.

Only ``\\n`` and ``\\r\\n`` break lines. Other Unicode line separators
(form feed, ``\\u2028`` and the like) stay in the line as ordinary
characters.
"""


def split_lines(text: str) -> list[str]:
    """Split text on explicit line breaks.

    A final line break does not start an empty line, so ``""`` has no
    lines and ``"A\\n"`` has one.

    Args:
        text: Text to split

    Returns:
        Lines without their line break characters
    """
    lines = text.split("\n")
    last = lines.pop()
    lines = [line.removesuffix("\r") for line in lines]
    if last:
        lines.append(last)
    return lines
