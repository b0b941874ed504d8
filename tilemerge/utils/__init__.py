# -*- coding: utf-8 -*-
"""
User interface helpers for manual play.
"""

from .windows import WindowBoard

__all__ = ["WindowBoard"]
