"""
Domain layer package.

Pure business logic: the trade-state document model, the instruction
model, domain services (navigation, instruction building) and ports.
No framework imports, no IO, no side effects.
"""
