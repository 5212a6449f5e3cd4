"""Rental model with one-line reports and rent cost from the actual rental price."""

__all__ = ["address", "vehicle", "client_type", "client", "rent", "demo"]