"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the resolution core to its reference data:
- CSV files bundled with the package or configured by path
- In-memory tables supplied by an embedding application
"""
