"""
CSV Viewer: load, filter, sort, page through and re-export delimited datasets.
"""

__version__ = "1.0.0"
