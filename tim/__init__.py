"""Manage named file, directory and git templates and copy them into place."""

__version__ = "0.1.0"