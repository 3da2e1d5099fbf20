"""
Turn the hard-coded colors of a graphic into CSS variables.

Each distinct color in a document gets a slot name: the first fill color
is "fill", the next distinct one "fill2", and so on (same for stroke).
The attribute is then rewritten to `fill="var(--fill2, #ff0000)"`, so
that the color can be themed, while the original color stays the fallback.
"""

import re
import logging


logger = logging.getLogger("iconifly")


COLOR_ATTR_RE = re.compile(r"(fill|stroke)=[\"']([^\"']+)[\"']", re.IGNORECASE)

RGB_RE = re.compile(
    r"rgba?\(\s*([\d.]+%?)\s*,\s*([\d.]+%?)\s*,\s*([\d.]+%?)(?:\s*,\s*([\d.]+%?))?\s*\)",
    re.IGNORECASE,
)

SKIP_VALUES = ("none", "currentColor")

KINDS = ("fill", "stroke")


# %% Colors


def round_half_up(x):
    """Round to the nearest int, with halves going up (unlike round())."""
    return int(x + 0.5)


def _clamp(v, lo, hi):
    return min(hi, max(lo, v))


def _parse_channel(val):
    if val.endswith("%"):
        v = round_half_up(float(val[:-1]) * 2.55)
    else:
        v = int(float(val))
    return _clamp(v, 0, 255)


def _parse_alpha(val):
    if val is None:
        return 1.0
    elif val.endswith("%"):
        a = float(val[:-1]) / 100
    else:
        a = float(val)
    return _clamp(a, 0.0, 1.0)


def rgb_to_hex(color):
    """Convert an rgb() or rgba() color to a lowercase hex string. Channels
    can be integers or percentages. An alpha below 1 adds an alpha byte.
    Returns None if the color cannot be parsed.
    """
    match = RGB_RE.search(color)
    if not match:
        return None
    try:
        r, g, b = [_parse_channel(match.group(i)) for i in (1, 2, 3)]
        a = _parse_alpha(match.group(4))
    except ValueError:
        return None  # e.g. "rgb(1.2.3, 0, 0)"

    hex = f"#{r:02x}{g:02x}{b:02x}"
    if a < 1:
        hex += f"{round_half_up(a * 255):02x}"
    return hex


def canonical_color(value):
    """Get the canonical form of a color value, or None if the value
    should not be turned into a variable.
    """
    if value in SKIP_VALUES:
        return None
    hex = value
    if value.lower().startswith("rgb"):
        hex = rgb_to_hex(value) or value
    if hex.startswith("#"):
        return hex
    return None


# %% Slots


def scan_colors(text):
    """Get a list of (kind, value) tuples for all fill and stroke
    attributes in the given svg text, in document order.
    """
    return [(m.group(1).lower(), m.group(2)) for m in COLOR_ATTR_RE.finditer(text)]


def assign_slots(occurrences):
    """Assign a slot name to each distinct color in a document.

    Given the (kind, value) tuples from scan_colors(), returns a tuple
    (colormap, slots). The colormap maps slot name to canonical color, in
    the order that the colors were first seen. The slots list has an entry
    for each occurrence: its slot name, or None if the value is left as is.
    """
    counts = {kind: 0 for kind in KINDS}
    seen = {}  # canonical color -> slot name
    colormap = {}
    slots = []

    for kind, value in occurrences:
        color = canonical_color(value)
        if color is None:
            slots.append(None)
            continue
        slot = seen.get(color, None)
        if slot is None:
            counts[kind] += 1
            slot = kind if counts[kind] == 1 else f"{kind}{counts[kind]}"
            seen[color] = slot
            colormap[slot] = color
        slots.append(slot)

    return colormap, slots


def substitute_colors(text):
    """Replace literal fill and stroke colors with CSS variables.

    Returns a tuple (new_text, colormap). Attributes that have no slot
    (none, currentColor, named colors, malformed values) stay exactly as
    they were. Nothing is written to disk; that's up to the caller.
    """
    colormap, slots = assign_slots(scan_colors(text))
    slot_iter = iter(slots)

    def replace(match):
        slot = next(slot_iter)
        if slot is None:
            return match.group(0)
        attr, value = match.group(1), match.group(2)
        color = colormap[slot]
        logger.debug(f"{value} -> {color} -> var(--{slot})")
        return f'{attr}="var(--{slot}, {color})"'

    new_text = COLOR_ATTR_RE.sub(replace, text)
    return new_text, colormap


def unwrap_colors(text):
    """Replace var(--slot, color) values with their fallback color.
    Mostly useful to inspect or test the result of substitute_colors().
    """
    return re.sub(r"var\(--[\w-]+,\s*([^)\"']+)\)", r"\1", text)
