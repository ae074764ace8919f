"""
Setup script for densemat

Pure-Python package in a src/ layout. The version is read from
src/densemat/__init__.py so it is defined in one place.
"""

from pathlib import Path
from setuptools import setup, find_packages


# Read version from src/densemat/__init__.py
def get_version():
    version_file = Path("src/densemat/__init__.py")
    if version_file.exists():
        for line in version_file.read_text().splitlines():
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip('"').strip("'")
    return "0.1.0"


# Read long description from README
def get_long_description():
    readme = Path("README.md")
    if readme.exists():
        return readme.read_text(encoding="utf-8")
    return ""


setup(
    name="densemat",
    version=get_version(),
    description="Lightweight generic dense matrices with arithmetic and text rendering",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={
        "interop": ["numpy>=1.21", "scipy>=1.7"],
        "test": ["pytest>=7.0", "numpy>=1.21", "scipy>=1.7"],
    },
    zip_safe=True,
)
