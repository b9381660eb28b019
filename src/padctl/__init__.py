"""padctl — label macropad macros with human-readable names."""

__version__ = "0.1.0"
