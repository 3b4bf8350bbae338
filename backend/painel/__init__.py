"""Painel: labor-market dashboard API (Gemini + IBGE proxy).

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
