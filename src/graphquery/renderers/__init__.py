"""Renderers for query descriptions."""

from .console import render_query

__all__ = ["render_query"]
