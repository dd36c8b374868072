"""
Infrastructure adapters for the trade bounded context.

Each adapter implements a domain port (ABC) and connects
to external systems: HTTP document sources and the CDM JSON format.
"""
