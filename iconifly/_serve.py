"""
Serve the generated documentation website, to preview it locally.
"""

import os
import logging

import asgineer

from ._config import config


logger = logging.getLogger("iconifly")

TEXT_EXTS = ".html", ".css", ".js", ".svg", ".json", ".md", ".txt"


def create_assets_from_dir(dirname):
    """Get a dict of assets from the files in the given directory. Html
    pages are stored without extension, and index.html as the root.
    """
    assets = {}
    for root, _, fnames in os.walk(dirname):
        for fname in sorted(fnames):
            filename = os.path.join(root, fname)
            key = os.path.relpath(filename, dirname).replace(os.sep, "/")
            with open(filename, "rb") as f:
                body = f.read()
            if fname.endswith(TEXT_EXTS):
                body = body.decode()
            if key.endswith(".html"):
                key = key[:-5]
                if key == "index":
                    key = ""
                elif key.endswith("/index"):
                    key = key[:-6]
            assets[key] = body
    return assets


def make_main_handler(site_dir):
    """Create the handler that serves the website in site_dir."""
    assets = create_assets_from_dir(site_dir)
    asset_handler = asgineer.utils.make_asset_handler(assets, max_age=0)

    async def main_handler(request):
        path = request.path.strip("/")
        # Links in the pages point to .html files
        if path.endswith(".html"):
            path = path[:-5]
            if path == "index":
                path = ""
        return await asset_handler(request, path)

    return main_handler


def serve():
    site_dir = os.path.join(config.docs_dir, "site")
    if not os.path.isdir(site_dir):
        raise RuntimeError(f"No website at {site_dir}, run `iconifly docs` first.")
    handler = asgineer.to_asgi(make_main_handler(site_dir))
    logger.info(f"Serving {site_dir} at http://{config.bind}")
    asgineer.run(handler, "uvicorn", config.bind, log_level="warning")
