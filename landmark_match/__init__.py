"""Landmark-based face comparison.

Maps detector landmarks of two faces into a shared canvas and compares them
by mean point distance.
"""

__version__ = "1.0.0"
