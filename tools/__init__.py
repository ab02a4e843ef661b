# -*- coding: utf-8 -*-
"""Plotting helpers (matplotlib)."""
