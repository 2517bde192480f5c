"""Oracle GoldenGate multi-instance management tool."""

__version__ = "1.0.0"