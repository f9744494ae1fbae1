"""
Rent vs Invest

Compares keeping a property as a rental against selling it and
reinvesting the net proceeds in stocks or bonds.
"""

__version__ = "0.1.0"
