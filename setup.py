"""Package setup for push_manifest."""

from setuptools import setup, find_packages

setup(
    name="push-manifest",
    version="1.0.0",
    description="Generate an HTTP/2 push manifest from static HTML documents",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "beautifulsoup4>=4.12.0",
        "lxml>=5.0.0",
        "colorlog>=6.8.0",
        "tqdm>=4.66.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "push-manifest=push_manifest.cli:main",
        ],
    },
)
