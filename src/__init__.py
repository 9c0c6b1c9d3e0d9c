"""Inventory Expiration API."""
