"""
Test Fixtures and Utilities

Synthetic ledger exports and YNAB caches shared by the integration tests.
All test data is synthetic and does not contain real financial information.
"""
