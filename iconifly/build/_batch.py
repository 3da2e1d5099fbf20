"""
Process all svg files of a category: mark images, turn the colors of
graphics into variables, optimize, and write the results.
"""

import os
import re
import logging

from ._colors import substitute_colors
from ._optimize import optimize_svg
from ._utils import (
    colors_filename,
    list_svg_files,
    read_text,
    write_text,
    write_json,
)


logger = logging.getLogger("iconifly")


IMAGE_HREF_RE = re.compile(r"<image([^>]*)href=\"([^\"]+)\"")


class ColorMaps:
    """Collects the color maps of all documents in a batch run, so
    they can be written to a single file (all-colors.json).
    """

    def __init__(self):
        self._maps = {}

    def __len__(self):
        return len(self._maps)

    def __contains__(self, name):
        return name in self._maps

    def __getitem__(self, name):
        return self._maps[name]

    def add(self, name, colormap):
        """Add the color map for the document with the given base name."""
        self._maps[name] = dict(colormap)

    def as_dict(self):
        return {name: dict(colormap) for name, colormap in self._maps.items()}

    def write(self, filename):
        write_json(filename, self.as_dict())


def mark_replaceable_images(text):
    """Turn the href of <image> elements into a data-replaceable attribute,
    so that the consumer can decide what image to show.
    """
    return IMAGE_HREF_RE.sub(r'<image\1data-replaceable="\2"', text)


def process_category(category, input_dir, output_dir, colormaps=None):
    """Process all svg files in input_dir and write them to output_dir.

    For graphics, the colors are turned into CSS variables, and the color
    map of each document is written to output_dir/colors and added to
    colormaps. For icons all colors become currentColor. A file that
    cannot be read or written is logged and skipped.

    Returns (colormaps, names), with names the base names of the documents
    that were written.
    """
    if colormaps is None:
        colormaps = ColorMaps()

    logger.info(f"Processing category {category}")
    os.makedirs(output_dir, exist_ok=True)
    colors_dir = os.path.join(output_dir, "colors")
    if category == "graphic":
        os.makedirs(colors_dir, exist_ok=True)

    fnames = list_svg_files(input_dir)
    logger.info(f"Found {len(fnames)} svg files in {input_dir}")

    names = []
    for fname in fnames:
        name = fname[:-4]
        input_path = os.path.join(input_dir, fname)
        output_path = os.path.join(output_dir, fname)

        try:
            text = read_text(input_path)
        except (OSError, UnicodeDecodeError) as err:
            logger.error(f"Could not read {input_path}: {err}")
            continue

        text = mark_replaceable_images(text)

        colormap = {}
        if category == "graphic":
            text, colormap = substitute_colors(text)
            if colormap:
                colormap_path = os.path.join(colors_dir, colors_filename(name))
                try:
                    write_json(colormap_path, colormap)
                except OSError as err:
                    logger.error(f"Could not write {colormap_path}: {err}")
                    continue
                logger.info(f"{fname}: {len(colormap)} colors")

        # Icons get currentColor, graphics must keep their variables
        text = optimize_svg(text, convert_colors=(category == "icon"))

        try:
            write_text(output_path, text)
        except OSError as err:
            logger.error(f"Could not write {output_path}: {err}")
            continue

        if colormap:
            colormaps.add(name, colormap)
        names.append(name)
        logger.debug(f"Wrote {output_path}")

    return colormaps, names


def optimize_all(svg_dir, out_dir, categories=("graphic", "icon")):
    """Process all categories, and write all color maps to
    out_dir/graphic/colors/all-colors.json. Returns the ColorMaps.
    """
    colormaps = ColorMaps()
    for category in categories:
        input_dir = os.path.join(svg_dir, category)
        output_dir = os.path.join(out_dir, category)
        if not os.path.isdir(input_dir):
            logger.warning(f"No such directory: {input_dir}")
            continue
        _, names = process_category(category, input_dir, output_dir, colormaps)
        logger.info(f"Category {category}: {len(names)} files written")

    if len(colormaps):
        filename = os.path.join(out_dir, "graphic", "colors", "all-colors.json")
        try:
            colormaps.write(filename)
            logger.info(f"Wrote {filename}")
        except OSError as err:
            logger.error(f"Could not write {filename}: {err}")

    return colormaps
