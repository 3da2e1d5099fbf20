"""
Misc utils.
"""

import os
import re
import json


# %% Names


def to_pascal_case(filename):
    """Convert a filename like "film-graphic.svg" to a component name
    like "FilmGraphic".
    """
    name = os.path.basename(filename)
    name = re.sub(r"\.[^/.]+$", "", name)
    words = re.split(r"[-_ ]+", name)
    return "".join(word[0].upper() + word[1:] for word in words if word)


def colors_filename(name):
    """Get the filename of the color map for the document with the given base name."""
    return f"{name}-colors.json"


def list_svg_files(dirname):
    """Get the sorted names of the svg files in a directory. Returns an
    empty list if the directory does not exist.
    """
    if not os.path.isdir(dirname):
        return []
    return sorted(fname for fname in os.listdir(dirname) if fname.endswith(".svg"))


# %% IO


def read_text(filename):
    """Read a whole text file (utf-8)."""
    with open(filename, "rb") as f:
        return f.read().decode()


def write_text(filename, text):
    """Write a whole text file (utf-8), creating the directory if needed."""
    dirname = os.path.dirname(filename)
    if dirname:
        os.makedirs(dirname, exist_ok=True)
    with open(filename, "wb") as f:
        f.write(text.encode())


def write_json(filename, ob):
    """Write an object as json, indented with two spaces."""
    write_text(filename, json.dumps(ob, indent=2))


def read_json(filename):
    """Read a json file."""
    return json.loads(read_text(filename))
