# flake8: noqa

from ._utils import to_pascal_case, colors_filename
from ._colors import (
    rgb_to_hex,
    canonical_color,
    scan_colors,
    assign_slots,
    substitute_colors,
    unwrap_colors,
)
from ._optimize import optimize_svg
from ._batch import ColorMaps, mark_replaceable_images, process_category, optimize_all
from ._components import generate_components, render_icon, render_graphic
from ._docs import md2html, generate_docs
