"""
Command-line tools for oaepkit.
"""
