"""
Package descriptor models.

This package provides the Pydantic data model describing a downloadable
corpus or resource package as published by a package catalog.
"""

from .package import Package

__all__ = ["Package"]
