"""A small vector paint program: shapes, affine transformations, selection, animation and saved drawings."""

__version__ = "0.1.0"