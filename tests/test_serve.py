import os
import tempfile

from asgineer.testutils import MockTestServer
from _common import run_tests

from iconifly._serve import create_assets_from_dir, make_main_handler


def _write(filename, body):
    os.makedirs(os.path.dirname(filename), exist_ok=True)
    with open(filename, "wb") as f:
        f.write(body)


def _make_site(root):
    site_dir = os.path.join(root, "site")
    _write(os.path.join(site_dir, "index.html"), b"<!DOCTYPE html><h1>Home</h1>")
    _write(
        os.path.join(site_dir, "components", "icons.html"),
        b"<!DOCTYPE html><h1>Icons</h1>",
    )
    _write(os.path.join(site_dir, "style.css"), b"body { margin: 0; }")
    _write(os.path.join(site_dir, "logo.png"), b"\x89PNG\r\n")
    return site_dir


def test_create_assets_from_dir():
    with tempfile.TemporaryDirectory() as root:
        assets = create_assets_from_dir(_make_site(root))
        assert sorted(assets) == ["", "components/icons", "logo.png", "style.css"]
        assert assets[""] == "<!DOCTYPE html><h1>Home</h1>"
        assert assets["style.css"] == "body { margin: 0; }"
        assert assets["logo.png"] == b"\x89PNG\r\n"


def test_main_handler():
    with tempfile.TemporaryDirectory() as root:
        handler = make_main_handler(_make_site(root))

    # The assets are loaded, so the site dir is no longer needed
    with MockTestServer(handler) as p:
        r = p.get("")
        assert r.status == 200
        assert r.body.decode() == "<!DOCTYPE html><h1>Home</h1>"

        # Pages can be asked with and without .html
        for path in ("components/icons", "components/icons.html", "/components/icons"):
            r = p.get(path)
            assert r.status == 200
            assert r.body.decode() == "<!DOCTYPE html><h1>Icons</h1>"

        r = p.get("index.html")
        assert r.status == 200
        assert "Home" in r.body.decode()

        r = p.get("style.css")
        assert r.status == 200
        assert r.headers["content-type"].startswith("text/css")

        # Caching with etag
        r = p.get("style.css", headers={"if-none-match": r.headers["etag"]})
        assert r.status == 304
        assert not r.body

        for path in ("foobarspam", "components", "foobarspam.html"):
            r = p.get(path)
            assert r.status == 404


if __name__ == "__main__":
    run_tests(globals())
