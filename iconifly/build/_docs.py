"""
Generate the documentation website: markdown pages listing all
components, and a static html rendering of these pages.
"""

import os
import logging

import jinja2
import markdown

from ._utils import (
    colors_filename,
    list_svg_files,
    read_json,
    read_text,
    to_pascal_case,
    write_text,
)


logger = logging.getLogger("iconifly")


env = jinja2.Environment(
    loader=jinja2.PackageLoader("iconifly", "templates"),
    keep_trailing_newline=True,
)

SITE_NAME = "Iconifly"

CATEGORIES = {
    "icons": ("icon", "Icons"),
    "graphics": ("graphic", "Graphics"),
}


def md2html(text, template, root=""):
    """Convert markdown to a full html page using the given template.
    The first two lines may start with "%", to set the title and
    description of the page.
    """
    title = description = ""
    if text.startswith("%"):
        title, _, text = text.partition("\n")
        title = title.strip("% \t\r\n")
    if text.startswith("%"):
        description, _, text = text.partition("\n")
        description = description.strip("% \t\r\n")
    title = f"{title} - {SITE_NAME}" if title and title != SITE_NAME else SITE_NAME

    main = markdown.markdown(text, extensions=["fenced_code", "tables"])
    return template.render(
        title=title,
        description=description or title,
        main=main,
        root=root,
        site_name=SITE_NAME,
    )


def collect_components(out_dir):
    """Get a dict that maps "icons" and "graphics" to a list of component
    dicts (name, pascal_name, path, svg). Svg files that cannot be read
    are skipped.
    """
    categories = {}
    for kind, (category, _) in CATEGORIES.items():
        dirname = os.path.join(out_dir, category)
        components = []
        for fname in list_svg_files(dirname):
            filename = os.path.join(dirname, fname)
            try:
                svg = read_text(filename)
            except (OSError, UnicodeDecodeError) as err:
                logger.error(f"Could not read {filename}: {err}")
                continue
            components.append(
                dict(
                    name=fname[:-4],
                    pascal_name=to_pascal_case(fname),
                    path=filename,
                    svg=svg.strip(),
                )
            )
        categories[kind] = components
    return categories


def _example_colors(out_dir, component):
    filename = os.path.join(
        out_dir, "graphic", "colors", colors_filename(component["name"])
    )
    try:
        colormap = read_json(filename)
    except (OSError, ValueError):
        colormap = {}
    return ", ".join(f"{slot}: '{color}'" for slot, color in colormap.items())


def render_category_page(kind, components, package_name, example_colors=""):
    """Get the markdown for the page that shows all components of a kind."""
    _, display_name = CATEGORIES[kind]
    example = components[0]["pascal_name"] if components else "MyComponent"
    return env.get_template("docs_category.md").render(
        kind=kind,
        display_name=display_name,
        components=components,
        package_name=package_name,
        example=example,
        example_colors=example_colors or "fill: '#333'",
    )


def render_index_page(categories):
    """Get the markdown for the home page."""
    return env.get_template("docs_index.md").render(
        title=SITE_NAME,
        tagline="Lightweight SVG icons and graphics for modern web apps",
        icon_count=len(categories["icons"]),
        graphic_count=len(categories["graphics"]),
    )


def generate_docs(out_dir, docs_dir, package_name):
    """Generate the markdown pages in docs_dir/docs and the website in
    docs_dir/site. Returns a dict that maps page names to markdown.
    """
    categories = collect_components(out_dir)

    pages = {"index": render_index_page(categories)}
    for kind, components in categories.items():
        example_colors = ""
        if kind == "graphics" and components:
            example_colors = _example_colors(out_dir, components[0])
        pages[f"components/{kind}"] = render_category_page(
            kind, components, package_name, example_colors
        )

    md_dir = os.path.join(docs_dir, "docs")
    site_dir = os.path.join(docs_dir, "site")
    template = env.get_template("page.html")
    for name, md in pages.items():
        root = "../" * name.count("/")
        write_text(os.path.join(md_dir, name + ".md"), md)
        write_text(os.path.join(site_dir, name + ".html"), md2html(md, template, root))
    write_text(os.path.join(site_dir, "style.css"), read_template("style.css"))

    logger.info(
        f"Generated docs for {len(categories['icons'])} icons "
        f"and {len(categories['graphics'])} graphics in {docs_dir}"
    )
    return pages


def read_template(name):
    """Get the raw source of a template file."""
    source, _, _ = env.loader.get_source(env, name)
    return source
