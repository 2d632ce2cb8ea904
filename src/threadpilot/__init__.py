"""ThreadPilot insurance and vehicle query services."""

__version__ = "1.0.0"
