"""
CodeBoard Backend: Application Package
=======================================

Layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← limits, declared language
    ├─────────────────────────────────────┤
    │     Classifier (pure, in-memory)    │  ← rules, scorer, overrides, labels
    └─────────────────────────────────────┘

The classifier imports nothing from the layers above it.
"""

__version__ = "1.0.0"
