"""Infrastructure Layer — logging setup for applications embedding requirement."""
