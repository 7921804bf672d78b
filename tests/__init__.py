"""
Test Suite for caldate

Test Structure:
- unit/: Unit tests mirroring src/ package structure
- integration/: CLI and configuration tests

Test Categories:
- Calendar helpers (leap years, month lengths, carry)
- Input classification
- CalendarDate construction, validation, comparison and arithmetic
- Command-line interface
"""
