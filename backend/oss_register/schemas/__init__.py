"""Pydantic Schemas — request decoding for API endpoints.

Invariants:
    - Schemas validate at the system boundary; services never validate shape
    - Wire names are camelCase (aliases), Python attributes snake_case
"""
