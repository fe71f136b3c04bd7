"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the expansion core to:
- Airport reference data (CSV files)
- Itinerary storage (text files)
"""
