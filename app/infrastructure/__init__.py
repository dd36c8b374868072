"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer. This is where HTTP clients,
wire formats, and other external integrations live.
"""
