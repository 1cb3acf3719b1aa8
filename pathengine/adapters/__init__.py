"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the services to:
- Graph storage (CSV files)
- Route computation (Dijkstra)
- Caching (in-memory, null)
"""
