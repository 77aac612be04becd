"""
Test Suite for billfold

Test Structure:
- unit/: Unit tests for core utilities, records and document output
- integration/: CLI commands run end to end against a temporary data directory

All clients, addresses and amounts are synthetic.
"""
