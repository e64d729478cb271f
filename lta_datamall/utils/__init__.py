"""
Utility functions for the LTA DataMall client.
"""

__all__ = []
