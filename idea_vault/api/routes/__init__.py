"""Route handlers for the Idea Vault API."""
