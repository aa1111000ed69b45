"""Metric normalization of free-form recipe ingredients and instructions."""

__version__ = "0.1.0"
