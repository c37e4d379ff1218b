"""
Test Suite for ledgersync

Test Structure:
- fixtures/: Shared synthetic data
- unit/: Unit tests mirroring the src/ package structure
- integration/: CLI and end-to-end workflow tests
"""
