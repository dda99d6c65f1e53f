"""
In-memory shopping cart simulator.
"""

__version__ = "1.0.0"
