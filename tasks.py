""" Invoke tasks for iconifly
"""

import os
import sys
import shutil
import importlib
import subprocess

from invoke import task

# ---------- Per project config ----------

NAME = "iconifly"
LIBNAME = NAME.replace("-", "_")

# Generated by the build, relative to the root
BUILD_OUTPUTS = ["optimized", "react/src", "doc/docs", "doc/site"]

# ----------------------------------------

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))
if not os.path.isdir(os.path.join(ROOT_DIR, LIBNAME)):
    sys.exit("package NAME seems to be incorrect.")


@task
def tests(ctx, cover=False):
    """Perform unit tests. Use --cover to open a webbrowser to show coverage."""
    import pytest  # noqa

    test_path = "tests"
    res = pytest.main(
        ["-v", f"--cov={LIBNAME}", "--cov-report=term", "--cov-report=html", test_path]
    )
    if res:
        sys.exit(res)
    if cover:
        import webbrowser

        webbrowser.open(os.path.join(ROOT_DIR, "htmlcov", "index.html"))


@task
def lint(ctx):
    """Validate the code style (e.g. undefined names)"""
    try:
        importlib.import_module("flake8")
    except ImportError:
        sys.exit("You need to ``pip install flake8`` to lint")

    # We use flake8 with minimal settings
    cmd = [
        sys.executable,
        "-m",
        "flake8",
        ROOT_DIR,
        "--max-line-length=999",
        "--extend-ignore=N,E731,E203,F541,D,B",
        "--exclude=build,dist,*.egg-info,node_modules",
    ]
    ret_code = subprocess.call(cmd, cwd=ROOT_DIR)
    if ret_code == 0:
        print("No style errors found")
    else:
        sys.exit(ret_code)


@task
def checkformat(ctx):
    """Check whether the code adheres to the style rules. Use format to fix."""
    black_wrapper(False)


@task
def format(ctx):
    """Automatically format the code (using black)."""
    black_wrapper(True)


def black_wrapper(writeback):
    """Helper function to invoke black programatically."""

    check = [] if writeback else ["--check"]
    sys.argv[1:] = check + [ROOT_DIR]

    import black

    black.main()


@task
def build(ctx, step="build"):
    """Build the svg files, components and docs. Use --step to run only
    one of optimize, generate or docs.
    """
    subprocess.check_call([sys.executable, "-m", LIBNAME, step], cwd=ROOT_DIR)


@task
def serve(ctx):
    """Serve the docs website to preview it."""
    subprocess.check_call([sys.executable, "-m", LIBNAME, "serve"], cwd=ROOT_DIR)


@task
def clean(ctx, outputs=False):
    """Clean the repo of temp files etc. Use --outputs to also remove
    what the build generated.
    """
    # Walk over all files and delete based on name
    for root, dirs, files in os.walk(ROOT_DIR):
        for dname in dirs:
            if dname in ("__pycache__", ".cache", ".pytest_cache"):
                shutil.rmtree(os.path.join(root, dname))
                print("Removing", dname)
        for fname in files:
            if fname.endswith((".pyc", ".pyo")) or fname == ".coverage":
                os.remove(os.path.join(root, fname))
                print("Removing", fname)
    # Delete specific files and directories
    fnames = ["htmlcov", "dist", "build", LIBNAME + ".egg-info"]
    if outputs:
        fnames += BUILD_OUTPUTS
    for fname in fnames:
        filename = os.path.join(ROOT_DIR, fname)
        if os.path.isfile(filename):
            os.remove(filename)
            print("Removing", filename)
        elif os.path.isdir(filename):
            shutil.rmtree(filename)
            print("Removing", filename)
