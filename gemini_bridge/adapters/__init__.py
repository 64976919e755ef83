"""Platform and provider implementations of the ports."""
