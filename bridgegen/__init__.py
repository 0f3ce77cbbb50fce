"""bridgegen — keep bridging/umbrella headers in sync with a source tree."""

__version__ = "0.1.0"
