"""An always-on-top Tk overlay showing live system statistics, with its settings, sampling and formatting."""

__version__ = "1.0.0"