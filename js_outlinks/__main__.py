"""
Main entry point for the js_outlinks package.

Allows running the extractor as: python -m js_outlinks
"""

from js_outlinks.cli import main

if __name__ == "__main__":
    main()
