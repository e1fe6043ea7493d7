"""Static ASCII art drawn under the weather readout."""

HOUSE = (
    "        `'::.",
    "     _________H ,%%&%,",
    "    /\\     _   \\%&&%%&%",
    "   /  \\___/^\\___\\%&%%&&",
    "   |  | []   [] |%\\Y&%'",
    "   |  |   .-.   | ||",
    " ~~@._|@@_|||_@@|~||~~~~~~~~~~~~~",
    "      `\"\"\") )\"\"\"`",
)


def render_house() -> list[str]:
    """Return the house art, one string per line."""
    return list(HOUSE)


def art_width(lines: list[str]) -> int:
    """Width of the widest line."""
    return max((len(line) for line in lines), default=0)
