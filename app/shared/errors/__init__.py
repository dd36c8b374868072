"""
Shared error handling package.

Translates trade domain errors into JSON error responses carrying
the failure kind and, where it applies, the offending document path.
"""
