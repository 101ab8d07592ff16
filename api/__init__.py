"""HTTP interface for the ledger."""
