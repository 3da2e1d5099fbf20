import os
import sys
import logging

import asgineer
import jinja2
import markdown

import iconifly
from iconifly import config
from iconifly.build import optimize_all, generate_components, generate_docs


logger = logging.getLogger("iconifly")

COMMANDS = ("optimize", "generate", "docs", "build", "serve")


def get_command(argv):
    """Get the command from the arguments, skipping --options and their values."""
    prev = ""
    for arg in argv[1:]:
        is_value = prev.startswith("--") and "=" not in prev
        if arg in COMMANDS and not is_value:
            return arg
        prev = arg
    return "build"


def run(command):
    if command in ("optimize", "build"):
        optimize_all(config.svg_dir, config.out_dir)
    if command in ("generate", "build"):
        generate_components(config.out_dir, config.react_dir)
    if command in ("docs", "build"):
        generate_docs(config.out_dir, config.docs_dir, config.package_name)
    if command == "serve":
        from iconifly._serve import serve

        serve()


def main(argv=None):
    if argv is None:
        argv = sys.argv

    # Special hooks exit early
    if len(argv) >= 2:
        if argv[1] in ("--version", "version"):
            print("iconifly", iconifly.__version__)
            print("asgineer", asgineer.__version__)
            print("jinja2", jinja2.__version__)
            print("markdown", markdown.__version__)
            sys.exit(0)

    logging.basicConfig(
        format="%(levelname)s %(module)s.%(funcName)s: %(message)s", level=logging.INFO
    )
    logger.setLevel(getattr(logging, config.log_level.upper()))

    command = get_command(argv)
    logger.info(f"Running {command} in {os.getcwd()}")
    try:
        run(command)
    except Exception:
        logger.exception(f"{command} failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
