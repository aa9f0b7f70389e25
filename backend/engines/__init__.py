"""
SWMS Risk Engines

Deterministic scoring, validation, classification and compliance engines
used by the Safe Work Method Statement builder.
"""
