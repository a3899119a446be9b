"""Frontdesk: restaurant front-of-house management service"""

__version__ = "1.0.0"
