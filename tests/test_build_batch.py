import os
import json
import tempfile

from _common import run_tests

from iconifly.build import (
    ColorMaps,
    mark_replaceable_images,
    process_category,
    optimize_all,
)


GRAPHIC1 = """<svg viewBox="0 0 100 60">
  <rect fill="#333333" width="100" height="60"/>
  <path fill="rgb(224, 224, 224)" stroke="#333333" d="M0 0L10 10"/>
  <image x="0" y="0" href="photo.png"/>
</svg>"""

GRAPHIC2 = """<svg viewBox="0 0 10 10"><path stroke="#e0e0e0" fill="none"/></svg>"""

PLAIN = """<svg viewBox="0 0 10 10"><path fill="none" stroke="currentColor"/></svg>"""

ICON = """<svg viewBox="0 0 24 24"><path fill="#000" d="M1 1"/></svg>"""


def _write(filename, text):
    os.makedirs(os.path.dirname(filename), exist_ok=True)
    with open(filename, "wb") as f:
        f.write(text.encode())


def _read(filename):
    with open(filename, "rb") as f:
        return f.read().decode()


def _make_svg_dir(root):
    svg_dir = os.path.join(root, "svg")
    _write(os.path.join(svg_dir, "graphic", "film-graphic.svg"), GRAPHIC1)
    _write(os.path.join(svg_dir, "graphic", "tiny.svg"), GRAPHIC2)
    _write(os.path.join(svg_dir, "graphic", "plain.svg"), PLAIN)
    _write(os.path.join(svg_dir, "graphic", "notes.txt"), "not an svg")
    _write(os.path.join(svg_dir, "icon", "home.svg"), ICON)
    return svg_dir


def test_colormaps():
    colormaps = ColorMaps()
    assert len(colormaps) == 0
    assert colormaps.as_dict() == {}

    colormap = {"fill": "#111"}
    colormaps.add("a", colormap)
    colormaps.add("b", {"fill": "#222", "stroke": "#333"})
    colormap["fill2"] = "#444"  # the accumulator has its own copy

    assert len(colormaps) == 2
    assert "a" in colormaps and "c" not in colormaps
    assert colormaps["a"] == {"fill": "#111"}
    assert colormaps.as_dict() == {
        "a": {"fill": "#111"},
        "b": {"fill": "#222", "stroke": "#333"},
    }

    with tempfile.TemporaryDirectory() as root:
        filename = os.path.join(root, "colors", "all-colors.json")
        colormaps.write(filename)
        assert json.loads(_read(filename)) == colormaps.as_dict()


def test_mark_replaceable_images():
    text = '<image x="1" href="a.png"/><image href="b.png"/><path d="M0"/>'
    assert mark_replaceable_images(text) == (
        '<image x="1" data-replaceable="a.png"/>'
        '<image data-replaceable="b.png"/><path d="M0"/>'
    )


def test_process_category_graphic():
    with tempfile.TemporaryDirectory() as root:
        svg_dir = _make_svg_dir(root)
        output_dir = os.path.join(root, "optimized", "graphic")

        colormaps, names = process_category(
            "graphic", os.path.join(svg_dir, "graphic"), output_dir
        )
        assert names == ["film-graphic", "plain", "tiny"]
        assert sorted(os.listdir(output_dir)) == [
            "colors",
            "film-graphic.svg",
            "plain.svg",
            "tiny.svg",
        ]

        # Documents without colors have no color file
        assert sorted(os.listdir(os.path.join(output_dir, "colors"))) == [
            "film-graphic-colors.json",
            "tiny-colors.json",
        ]
        assert colormaps.as_dict() == {
            "film-graphic": {"fill": "#333333", "fill2": "#e0e0e0"},
            "tiny": {"stroke": "#e0e0e0"},
        }

        filename = os.path.join(output_dir, "colors", "film-graphic-colors.json")
        text = _read(filename)
        assert json.loads(text) == {"fill": "#333333", "fill2": "#e0e0e0"}
        assert text == json.dumps({"fill": "#333333", "fill2": "#e0e0e0"}, indent=2)

        svg = _read(os.path.join(output_dir, "film-graphic.svg"))
        assert '<rect fill="var(--fill, #333333)"' in svg
        assert 'fill="var(--fill2, #e0e0e0)" stroke="var(--fill, #333333)"' in svg
        assert 'data-replaceable="photo.png"' in svg
        assert "href" not in svg

        svg = _read(os.path.join(output_dir, "plain.svg"))
        assert svg == PLAIN


def test_process_category_icon():
    with tempfile.TemporaryDirectory() as root:
        svg_dir = _make_svg_dir(root)
        output_dir = os.path.join(root, "optimized", "icon")

        colormaps, names = process_category(
            "icon", os.path.join(svg_dir, "icon"), output_dir
        )
        assert names == ["home"]
        assert len(colormaps) == 0
        assert not os.path.isdir(os.path.join(output_dir, "colors"))

        svg = _read(os.path.join(output_dir, "home.svg"))
        assert svg == '<svg viewBox="0 0 24 24"><path fill="currentColor" d="M1 1"/></svg>'


def test_process_category_continues_on_error():
    with tempfile.TemporaryDirectory() as root:
        svg_dir = _make_svg_dir(root)
        input_dir = os.path.join(svg_dir, "graphic")
        output_dir = os.path.join(root, "optimized", "graphic")

        # A file that is not utf-8, and a directory that looks like an svg
        with open(os.path.join(input_dir, "broken.svg"), "wb") as f:
            f.write(b"<svg fill='\xff\xfe'></svg>")
        os.makedirs(os.path.join(input_dir, "folder.svg"))

        colormaps, names = process_category("graphic", input_dir, output_dir)
        assert names == ["film-graphic", "plain", "tiny"]
        assert "broken" not in colormaps
        assert not os.path.exists(os.path.join(output_dir, "broken.svg"))


def test_process_category_write_failure():
    with tempfile.TemporaryDirectory() as root:
        svg_dir = _make_svg_dir(root)
        input_dir = os.path.join(svg_dir, "graphic")
        output_dir = os.path.join(root, "optimized", "graphic")

        # A directory in the place of an output file makes writing fail
        os.makedirs(os.path.join(output_dir, "tiny.svg"))
        os.makedirs(os.path.join(output_dir, "colors", "film-graphic-colors.json"))

        colormaps, names = process_category("graphic", input_dir, output_dir)
        assert names == ["plain"]
        assert "film-graphic" not in colormaps
        assert "tiny" not in colormaps
        assert not os.path.exists(os.path.join(output_dir, "film-graphic.svg"))


def test_optimize_all():
    with tempfile.TemporaryDirectory() as root:
        svg_dir = _make_svg_dir(root)
        out_dir = os.path.join(root, "optimized")

        colormaps = optimize_all(svg_dir, out_dir)
        assert sorted(colormaps.as_dict()) == ["film-graphic", "tiny"]

        filename = os.path.join(out_dir, "graphic", "colors", "all-colors.json")
        assert json.loads(_read(filename)) == colormaps.as_dict()
        assert os.path.isfile(os.path.join(out_dir, "icon", "home.svg"))

        # Running again gives the same result
        text1 = _read(os.path.join(out_dir, "graphic", "film-graphic.svg"))
        all1 = _read(filename)
        optimize_all(svg_dir, out_dir)
        assert _read(os.path.join(out_dir, "graphic", "film-graphic.svg")) == text1
        assert _read(filename) == all1


def test_optimize_all_missing_dirs():
    with tempfile.TemporaryDirectory() as root:
        out_dir = os.path.join(root, "optimized")
        colormaps = optimize_all(os.path.join(root, "nope"), out_dir)
        assert len(colormaps) == 0
        assert not os.path.exists(os.path.join(out_dir, "graphic", "colors"))


if __name__ == "__main__":
    run_tests(globals())
