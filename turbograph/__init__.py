"""In-memory Turbo C style raster graphics: canvas, shapes, polygons, text, demo and exercises."""

__version__ = "1.0.2"
__all__ = ["canvas", "shapes", "polygon", "text", "demo", "exercises"]