"""
Run Package

Configuration shared by genome decoding and network activation.

Exported Classes:
    Config: Configuration parameters parsed from an INI file
"""

from evonet.run.config import Config

__all__ = ['Config']
