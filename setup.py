"""Packaging for the Simcoe analytics tracking facade.

Supports ``pip install -e .`` as well as ``python setup.py develop`` as a
fallback for editable installs when PEP 660 editable metadata preparation
fails on some environments.
"""

from pathlib import Path

from setuptools import find_packages, setup

HERE = Path(__file__).parent
README = (
    (HERE / "README.md").read_text(encoding="utf8")
    if (HERE / "README.md").exists()
    else ""
)


setup(
    name="simcoe",
    version="0.1.0",
    description="Vendor-neutral analytics tracking facade with an mParticle tracker",
    long_description=README,
    long_description_content_type="text/markdown",
    license="MIT",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    zip_safe=False,
    python_requires=">=3.9",
    install_requires=[
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
