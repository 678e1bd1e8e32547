"""Small, dependency-free helpers shared across the ledger package."""
