import os
from setuptools import setup, find_packages
from typing import Dict, List, Final


this_directory: Final[str] = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(this_directory, "VERSION"), "r") as f:
    __version__ = f.read().strip()

with open(os.path.join(this_directory, "README.md"), "r", encoding="utf-8") as f:
    long_description = f.read()

# NumPy is only needed to consume `codepoints()` buffers, never to build or import the package
extras_require: Dict[str, List[str]] = {
    "numpy": ["numpy"],
    "test": ["pytest", "numpy"],
    "bench": ["fire"],
}


setup(
    name="ustring",
    version=__version__,
    description="Owned and borrowed strings of fixed-width Unicode scalar values with O(1) indexing and slicing",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="Apache-2.0",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Natural Language :: English",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
        "Operating System :: OS Independent",
        "Topic :: Text Processing :: General",
    ],
    python_requires=">=3.8",
    packages=find_packages(include=["ustring", "ustring.*"]),
    extras_require=extras_require,
)
