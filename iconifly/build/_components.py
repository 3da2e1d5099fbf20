"""
Generate React components from the optimized svg files.

Icons take their color from the surrounding text (currentColor). Graphics
get a `colors` prop, with the color map of the graphic as the default,
so that each color slot can be overridden.
"""

import os
import re
import json
import logging

import jinja2

from ._utils import (
    colors_filename,
    list_svg_files,
    read_json,
    read_text,
    to_pascal_case,
    write_text,
)


logger = logging.getLogger("iconifly")


# JSX uses curly braces, so we use other delimiters for variables
jsx_env = jinja2.Environment(
    loader=jinja2.PackageLoader("iconifly", "templates"),
    variable_start_string="[[",
    variable_end_string="]]",
    trim_blocks=True,
    keep_trailing_newline=True,
)

SVG_TAG_RE = re.compile(r"<svg([^>]*)>", re.IGNORECASE)
HYPHEN_ATTR_RE = re.compile(r"(?<![\w:-])([a-zA-Z]+(?:[-:][a-zA-Z]+)+)=")
VAR_ATTR_RE = re.compile(r"(fill|stroke)=\"var\(--([\w-]+)[^\"]*\)\"")


def _get_attr(attrs, name, default):
    match = re.search(r"(?<![\w-])" + name + r"=\"([^\"]*)\"", attrs)
    return match.group(1) if match else default


def parse_svg_content(text):
    """Get a dict with the view_box, width, height, attrs and inner
    content of an svg document.
    """
    match = SVG_TAG_RE.search(text)
    attrs = match.group(1) if match else ""
    inner = SVG_TAG_RE.sub("", text, count=1)
    inner = re.sub(r"</svg>", "", inner, flags=re.IGNORECASE)
    return {
        "view_box": _get_attr(attrs, "viewBox", "0 0 24 24"),
        "width": _get_attr(attrs, "width", "24"),
        "height": _get_attr(attrs, "height", "24"),
        "attrs": attrs,
        "inner": inner.strip(),
    }


def _camelize(match):
    name = match.group(1)
    if name.startswith(("data-", "aria-")):
        return match.group(0)
    parts = re.split(r"[-:]", name)
    return parts[0] + "".join(p[0].upper() + p[1:] for p in parts[1:]) + "="


def camelize_attributes(text):
    """Convert svg attribute names to the names that React expects,
    e.g. stroke-width -> strokeWidth and xlink:href -> xlinkHref.
    """
    text = HYPHEN_ATTR_RE.sub(_camelize, text)
    text = re.sub(r"(?<![\w-])class=", "className=", text)
    return text


def colors_to_props(text):
    """Replace fill="var(--fill2, #123456)" with fill={colors.fill2}."""
    return VAR_ATTR_RE.sub(r"\1={colors.\2}", text)


def render_icon(name, text):
    """Get the source of a React component for an icon."""
    parsed = parse_svg_content(text)
    attrs = parsed["attrs"]
    for attr in ("width", "height", "viewBox"):
        attrs = re.sub(r"\s*(?<![\w-])" + attr + r"=\"[^\"]*\"", "", attrs)
    attrs = camelize_attributes(attrs).strip()
    return jsx_env.get_template("icon.jsx").render(
        name=name,
        attrs=(" " + attrs) if attrs else "",
        view_box=parsed["view_box"],
        inner=camelize_attributes(parsed["inner"]),
    )


def render_graphic(name, text, colormap):
    """Get the source of a React component for a graphic. The colormap
    becomes the default value of the colors prop.
    """
    parsed = parse_svg_content(text)
    inner = parsed["inner"]
    if colormap:
        inner = colors_to_props(inner)
    view_box_parts = parsed["view_box"].split()
    width, height = parsed["width"], parsed["height"]
    if len(view_box_parts) == 4:
        width, height = view_box_parts[2], view_box_parts[3]
    return jsx_env.get_template("graphic.jsx").render(
        name=name,
        default_colors=json.dumps(colormap, indent=2),
        width=width,
        height=height,
        view_box=parsed["view_box"],
        inner=camelize_attributes(inner),
    )


def load_colormap(colors_dir, name):
    """Load the color map for the graphic with the given base name.
    Returns an empty dict if there is none.
    """
    filename = os.path.join(colors_dir, colors_filename(name))
    if not os.path.isfile(filename):
        return {}
    try:
        return read_json(filename)
    except (OSError, ValueError) as err:
        logger.warning(f"Could not read color file {filename}: {err}")
        return {}


def _generate_dir(kind, src_dir, dst_dir, render):
    os.makedirs(dst_dir, exist_ok=True)
    names = []
    for fname in list_svg_files(src_dir):
        name = to_pascal_case(fname)
        filename = os.path.join(src_dir, fname)
        try:
            code = render(name, fname[:-4], read_text(filename))
        except (OSError, UnicodeDecodeError) as err:
            logger.error(f"Could not read {filename}: {err}")
            continue
        try:
            write_text(os.path.join(dst_dir, name + ".jsx"), code)
        except OSError as err:
            logger.error(f"Could not write component {name}: {err}")
            continue
        names.append(name)
    names.sort()
    index = jsx_env.get_template("index.js").render(names=names)
    write_text(os.path.join(dst_dir, "index.js"), index)
    logger.info(f"Generated {len(names)} {kind} components")
    return names


def generate_components(out_dir, react_dir):
    """Generate the React components for the optimized icons and graphics
    in out_dir, into react_dir/src. Returns a dict with the component
    names per kind.
    """
    src_dir = os.path.join(react_dir, "src")
    graphic_dir = os.path.join(out_dir, "graphic")
    colors_dir = os.path.join(graphic_dir, "colors")

    def icon(name, basename, text):
        return render_icon(name, text)

    def graphic(name, basename, text):
        return render_graphic(name, text, load_colormap(colors_dir, basename))

    result = {
        "icons": _generate_dir(
            "icon", os.path.join(out_dir, "icon"), os.path.join(src_dir, "icons"), icon
        ),
        "graphics": _generate_dir(
            "graphic", graphic_dir, os.path.join(src_dir, "graphics"), graphic
        ),
    }

    main = jsx_env.get_template("main.js").render(modules=["icons", "graphics"])
    write_text(os.path.join(src_dir, "index.js"), main)
    return result
