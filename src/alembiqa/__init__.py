"""Alembiqa -- code quality and test generation tool."""

__version__ = '0.1.0'
