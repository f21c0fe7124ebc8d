"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Map sources (built-in sample map)
- Route solvers (Dijkstra)
"""
