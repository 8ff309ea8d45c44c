"""Core Layer — rejection envelope, error normalization, mock registry contract.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Normalization functions are pure and deterministic
"""
