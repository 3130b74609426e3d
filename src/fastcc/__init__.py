"""
fast-cc-hooks: conventional commit parsing and validation.
"""

__version__ = "0.1.0"
