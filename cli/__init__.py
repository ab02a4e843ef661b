# -*- coding: utf-8 -*-
"""
Command-line entry points (run with `python -m cli.<name>`):

- solve : minimum cost and optimal-cell count for one maze file
"""
__all__ = [
    "solve",
]
