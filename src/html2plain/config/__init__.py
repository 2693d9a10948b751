"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`
    3. ``HTTP_HOST`` environment fallback for an empty base URL
"""

from .schema import ConversionConfig, LinkStyle, load_config

__all__ = ["ConversionConfig", "LinkStyle", "load_config"]
