"""
FootyHub: football-data.org proxy, standings view-model and match predictor.
"""

__version__ = "0.1.0"
