"""
WCG character generator core.

Validates character class feature data at startup and resolves
profession rolls against the 1-99 profession table.
"""

__version__ = "0.1.0"
