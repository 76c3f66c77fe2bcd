"""
Algobox - local Algorand node sandbox tooling.
"""

__version__ = "0.1.0"
