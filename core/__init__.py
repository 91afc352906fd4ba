"""
Core module for shared domain infrastructure.

This module contains:
- Domain events, capability contracts and exceptions
- Guard clauses and value objects
- The in-memory event bus and event handlers
- Prometheus metrics
"""
