"""Reading, editing and writing Office Open XML packages."""

__version__ = "0.1.0"