"""
Pure lookup logic for the registry.

This package is responsible for:
* Keeping request-derived path fragments inside the registry root.
* Ordering directory names by semantic version.
* Resolving a partial version spec to a single version directory.
* The metadata schema and the error types raised by lookups.
"""
