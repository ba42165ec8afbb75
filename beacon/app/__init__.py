"""Application wiring: configuration and the composition root."""
