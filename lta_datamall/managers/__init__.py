"""
Configuration management for the LTA DataMall client.
"""

__all__ = []
