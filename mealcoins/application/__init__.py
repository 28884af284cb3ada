"""Application layer: store shell, ports and use cases."""
