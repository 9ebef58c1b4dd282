"""Blogstage - a small routed markdown post viewer."""

__version__ = "0.1.0"
