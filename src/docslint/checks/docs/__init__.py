"""Markdown documentation checks, one function per check id."""
