"""Core (UI-agnostic) headcount dashboard logic.

This package contains:
- the static entity store (schools, interim assignments, salary flags)
- view-state normalization and transitions
- page compute functions (JSON-serializable payloads)
- chart helpers (Altair -> Vega-Lite spec dict)
"""
