import re

from setuptools import find_packages, setup


with open("iconifly/__init__.py") as fh:
    VERSION = re.search(r"__version__ = \"(.*?)\"", fh.read()).group(1)


with open("requirements.txt") as fh:
    runtime_deps = [x.strip() for x in fh.read().splitlines() if x.strip()]


short_description = "Build SVG icons and graphics into themeable React components"
long_description = """
# Iconifly

Optimizes raw SVG assets, turns the colors of graphics into CSS variables,
generates React components, and builds a documentation website.

```
python -m iconifly build
python -m iconifly serve
```
"""

setup(
    name="iconifly",
    version=VERSION,
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"iconifly": ["templates/*"]},
    python_requires=">=3.6.0",
    install_requires=runtime_deps,
    extras_require={
        "test": ["pytest", "pytest-cov", "flake8", "black", "invoke", "requests"],
    },
    entry_points={"console_scripts": ["iconifly=iconifly.__main__:main"]},
    license="MIT",
    description=short_description,
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: MacOS :: MacOS X",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: POSIX",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3 :: Only",
    ],
)
