"""
TradeUnwind: partial unwind instructions for CDM trade documents.

Application package root. A small service using hexagonal architecture
(ports & adapters) with domain-driven design.

Bounded contexts:
    - trade: Trade-state parsing, economic-terms navigation, qualification
      and quantity-change instruction construction.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (HTTP, CDM JSON) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
