"""Batch services and the address extraction pipelines."""
