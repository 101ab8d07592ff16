"""Console entry point for the ledger."""
