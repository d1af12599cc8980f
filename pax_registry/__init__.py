"""
pax-registry - read-only package registry server.
"""

__version__ = "0.1.0"
__package_name__ = "pax-registry"
