#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility helpers shared by the all2trac renderers and CLI."""
