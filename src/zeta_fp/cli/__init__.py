"""Zeta FP CLI"""
from zeta_fp import __version__

__all__ = ["__version__"]
