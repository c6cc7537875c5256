"""Aggregation module for dominant-value summaries.

- Computes per-question dominant answers from submission history
- Reads the latest stored snapshot
- Forbidden: HTTP concerns, store writes
"""
