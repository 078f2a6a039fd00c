"""
DreamLife - answer resolution for the LAvision dream-life assistant.
"""

__version__ = "0.1.0"
