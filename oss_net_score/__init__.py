"""
OSS Net Score - weighted health scores for open-source packages.
"""

__version__ = "0.1.0"
