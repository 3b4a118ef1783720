"""Constant definitions shared across Mergeguard modules."""
