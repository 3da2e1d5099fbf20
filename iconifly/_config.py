import os
import sys


def to_path(value):
    """Expand a user path and strip surrounding whitespace"""
    path = str(value).strip()
    if not path:
        raise ValueError("path cannot be empty")
    return os.path.expanduser(path)


def to_log_level(value):
    """Ensures that the log level is one that logging knows about"""
    level = str(value).strip().lower()
    if level not in ("debug", "info", "warning", "error", "critical"):
        raise ValueError(f"invalid log level {value!r}")
    return level


class Config:
    """Object that holds config values.

    * `svg_dir (str)`: the directory with the raw svg files, one subdirectory
      per category (e.g. "graphic" and "icon"). Default "svg".
    * `out_dir (str)`: the directory to write optimized svg files to.
      Color maps are written to `out_dir/graphic/colors`. Default "optimized".
    * `react_dir (str)`: the React package in which `src/icons` and
      `src/graphics` are generated. Default "react".
    * `docs_dir (str)`: the documentation directory. Markdown goes in
      `docs_dir/docs` and the rendered website in `docs_dir/site`. Default "doc".
    * `package_name (str)`: the npm package name used in the docs.
      Default "@iconifly/react".
    * `log_level (str)`: the log level for iconifly. Default "info".
    * `bind (str)`: the address and port to serve the docs preview on.
      Default "127.0.0.1:8080".

    The values can be configured using CLI arguments and environment variables.
    For CLI arguments, the following formats are supported:
    ```
    python -m iconifly build --svg_dir=assets/svg
    python -m iconifly build --svg-dir assets/svg
    ```

    For environment variable, the key is uppercase and prefixed:
    ```
    ICONIFLY_SVG_DIR=assets/svg
    ```
    """

    _ITEMS = [
        ("svg_dir", to_path, "svg"),
        ("out_dir", to_path, "optimized"),
        ("react_dir", to_path, "react"),
        ("docs_dir", to_path, "doc"),
        ("package_name", str, "@iconifly/react"),
        ("log_level", to_log_level, "info"),
        ("bind", str, "127.0.0.1:8080"),
    ]
    __slots__ = [name for name, _, _ in _ITEMS]


config = Config()


def set_config(argv=None, env=None):
    """Set config values. By default argv is sys.argv and env is os.environ."""
    if argv is None:
        argv = sys.argv
    if env is None:
        env = os.environ

    _reset_config_to_defaults()
    _update_config_from_argv(argv)
    _update_config_from_env(env)


def _reset_config_to_defaults():
    for name, _, default in Config._ITEMS:
        setattr(config, name, default)


def _update_config_from_argv(argv):
    for i in range(len(argv)):
        arg = argv[i]
        for config_attr, conv, _ in Config._ITEMS:
            for name in (config_attr, config_attr.replace("_", "-")):
                if arg.startswith(f"--{name}="):
                    _, _, raw_value = arg.partition("=")
                elif arg == f"--{name}":
                    if i + 1 < len(argv):
                        raw_value = argv[i + 1]
                    else:
                        raise RuntimeError(f"Value for {arg} not given")
                else:
                    continue
                try:
                    setattr(config, config_attr, conv(raw_value))
                except Exception as err:
                    raise RuntimeError(f"Could not set config.{config_attr}: {err}")
                break


def _update_config_from_env(env):
    for name, conv, _ in Config._ITEMS:
        env_name = f"ICONIFLY_{name.upper()}"
        raw_value = env.get(env_name, None)
        if raw_value:
            try:
                setattr(config, name, conv(raw_value))
            except Exception as err:
                raise RuntimeError(f"Could not set config.{name}: {err}")


# Init config
set_config()
