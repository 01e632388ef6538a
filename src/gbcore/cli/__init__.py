"""
gbcore Command-Line Interface
=============================

- **gbtrace**: load a raw binary into a fresh CPU and trace its execution

Implemented as a Click application with help and error reporting.
"""

__all__ = ["gbtrace"]
