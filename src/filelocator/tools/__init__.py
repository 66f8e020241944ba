"""
Search tools for the File Locator.

This module contains the path normalizer, the memoizing directory lister,
the group registry and the recursive locator built on top of them.
"""
