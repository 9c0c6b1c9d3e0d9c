"""Application layer - Ports, services and use cases."""
