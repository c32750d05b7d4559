"""
Test Suite for Cowry

Test Structure:
- unit/: Unit tests mirroring src/ package structure
- integration/: Configuration and CLI tests

Test Categories:
- Rounding modes and operand coercion
- Currency descriptors, parsing and display
- Money arithmetic, comparison and serialization
- Largest-remainder allocation
"""
