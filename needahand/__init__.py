# needahand/__init__.py
"""Need A Hand: conversational intake and worker matching."""

__version__ = "1.0.0"
