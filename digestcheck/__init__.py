"""
digestcheck: Print or verify checksum manifests.

Streams named inputs through a pluggable digest primitive and re-verifies
`digest  filename` manifests with md5sum-compatible reporting modes.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
