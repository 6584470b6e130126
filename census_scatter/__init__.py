"""Census Scatter - poverty vs. healthcare coverage scatter chart by U.S. state."""

__version__ = "0.1.0"
