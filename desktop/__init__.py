"""Desktop front end for the ledger."""
