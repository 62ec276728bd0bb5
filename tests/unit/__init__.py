"""Unit tests for individual components in isolation.

Coverage:
    - cleaning/: each stage, pipeline composition, cleaned-text invariants
    - parsing/: pypdf extraction and book assembly
    - config: settings validation and environment loading

No network or server needed. Leverages pytest-check for multiple assertions
per test.
"""
