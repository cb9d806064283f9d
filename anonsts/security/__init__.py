"""Anonymous token codec, principal and address checks."""
