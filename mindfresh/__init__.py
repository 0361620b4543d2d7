"""
Mindfresh

Mood-driven wellness recommendations: music, podcasts and books matched to
the user's latest self-reported mood.
"""

__version__ = "1.0.0"
