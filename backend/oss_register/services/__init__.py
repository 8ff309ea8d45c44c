"""Services Layer — operation handlers for the register.

Invariants:
    - Every handler is built by operation.wrap(); no hand-written try/except per operation
    - Handler modules grouped by service name (one file per service)
"""
