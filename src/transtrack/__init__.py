"""Warehouse shipment file processors."""

__version__ = "0.1.0"
