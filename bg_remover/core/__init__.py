"""Core domain primitives shared across layers."""
