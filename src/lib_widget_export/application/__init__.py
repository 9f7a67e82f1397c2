"""Application layer: ports and use cases orchestrating widget exports."""
