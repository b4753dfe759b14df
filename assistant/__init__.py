"""
UniSync campus assistant: text understanding for the portal chat.
"""

__version__ = "1.0.0"
