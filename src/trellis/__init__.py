"""Trellis - scaffold backend, frontend and fullstack Node projects."""

__version__ = "0.1.0"
