"""
Filesystem access: the package registry and the metadata descriptor reader.
"""
