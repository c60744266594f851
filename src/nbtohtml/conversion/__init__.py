"""Conversion pipeline: cell and output dispatch, assembly."""
