"""
A basic svg optimizer. It does not parse the svg, but removes the usual
editor cruft and whitespace with a handful of regexps. Good enough for
hand-made or exported icons.
"""

import re


XML_DECL_RE = re.compile(r"<\?xml[^>]*\?>")
DOCTYPE_RE = re.compile(r"<!DOCTYPE[^>]*>", re.IGNORECASE)
COMMENT_RE = re.compile(r"<!--(.*?)-->", re.DOTALL)
METADATA_RE = re.compile(r"<metadata[^>]*?(/>|>.*?</metadata>)", re.DOTALL)
EDITOR_ELEMENT_RE = re.compile(
    r"<(sodipodi|inkscape):[\w-]+[^>]*?(/>|>.*?</(sodipodi|inkscape):[\w-]+>)",
    re.DOTALL,
)
EDITOR_ATTR_RE = re.compile(
    r"\s+(xmlns:)?(sodipodi|inkscape)(:[\w-]+)?=(\"[^\"]*\"|'[^']*')"
)
TAG_RE = re.compile(r"<[^!?][^>]*>")
COLOR_ATTR_RE = re.compile(r"((?:fill|stroke)=)([\"'])([^\"']+)\2")

LICENSE_KEEP_WORDS = ("copyright", "license")


def _keep_comment(match):
    body = match.group(1).lower()
    if any(word in body for word in LICENSE_KEEP_WORDS):
        return match.group(0)
    return ""


def _collapse_tag(match):
    tag = match.group(0)
    tag = re.sub(r"\s+", " ", tag)
    tag = tag.replace(" />", "/>").replace(" >", ">")
    return tag


def _to_current_color(match):
    prefix, quote, value = match.groups()
    if value in ("none", "currentColor") or value.startswith("var("):
        return match.group(0)
    return f"{prefix}{quote}currentColor{quote}"


def optimize_svg(text, convert_colors=False):
    """Optimize the given svg text. With convert_colors, all literal fill
    and stroke colors become currentColor (for single-color icons). This
    must be off for graphics, or the color variables would be lost.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")

    text = XML_DECL_RE.sub("", text)
    text = DOCTYPE_RE.sub("", text)
    text = COMMENT_RE.sub(_keep_comment, text)
    text = METADATA_RE.sub("", text)
    text = EDITOR_ELEMENT_RE.sub("", text)
    text = EDITOR_ATTR_RE.sub("", text)

    # Whitespace
    text = TAG_RE.sub(_collapse_tag, text)
    text = re.sub(r">\s+<", "><", text)
    text = text.strip()

    if convert_colors:
        text = COLOR_ATTR_RE.sub(_to_current_color, text)

    return text
