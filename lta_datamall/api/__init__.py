"""
API integration for the LTA DataMall client.

This package holds the client capability, the blocking and async
transports, the shared request/decode pipeline and one module per
resource group.
"""

__all__ = []
