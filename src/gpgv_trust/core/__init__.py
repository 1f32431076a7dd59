"""Core verification logic for gpgv-trust."""
