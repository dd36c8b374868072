"""
Trade bounded context: domain layer.

This module contains all domain logic for the trade context:
- Trade-state document model
- Economic-terms navigation
- Quantity-change (unwind) instruction construction
"""
