"""Package setup for js_outlinks."""

from setuptools import setup, find_packages

setup(
    name="js-outlinks",
    version="1.0.0",
    description="Heuristic outlink extraction from JavaScript and inline scripts for web crawlers",
    packages=find_packages(include=["js_outlinks", "js_outlinks.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "beautifulsoup4>=4.12.0",
        "lxml>=5.0.0",
        "urllib3>=2.0.0",
    ],
    extras_require={
        "ui": [
            "tqdm>=4.66.0",
            "colorlog>=6.8.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "js-outlinks=js_outlinks.cli:main",
        ],
    },
)
