"""
Test suite for geokernel

Contains:
- tests/unit/          : Unit tests for numeric layer, predicates and shapes
"""
