"""HTTP API for Idea Vault."""
