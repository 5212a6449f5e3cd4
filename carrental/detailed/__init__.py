"""Rental model with multi-line reports and tier-discounted rent cost."""

__all__ = ["address", "vehicle", "client_type", "client", "rent"]