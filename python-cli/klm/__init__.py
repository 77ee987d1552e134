"""
MSIKLM - lighting control for the SteelSeries keyboard of MSI gaming notebooks.
"""

__version__ = "1.0.0"
