"""Rendering of maze grids to text and raster images."""
