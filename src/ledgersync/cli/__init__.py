"""
Command Line Interface Package

Command Structure:
- ledgersync: main entry point with utility commands (version, config)
- ledgersync sync: reconcile a ledger export and apply the result
- ledgersync fetch: cache an account's YNAB transactions for offline runs
"""
