"""Category-agnostic version-sniffing core.

Pure functions over already-decoded JSON: no file access, no global
mutable state.
"""
