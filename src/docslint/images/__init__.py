"""Raster image audit and WebP conversion with markdown reference rewriting."""
