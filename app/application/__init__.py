"""
Application layer package.

Use cases that orchestrate domain services through ports.
Each use case is a single class with one public method (`execute`).
This layer depends on domain ports, never on infrastructure.
"""
