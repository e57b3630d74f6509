"""
Scaffold - layered resource and configuration resolution

Scaffold resolves named resources (config files, views, module assets)
across an ordered list of search roots and merges configuration found in
those roots into one tree addressed by dot-notation keys.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
