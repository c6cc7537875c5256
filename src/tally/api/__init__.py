"""API module for Tally.

API layer:
- Validates inputs, reads/writes DB
- Returns payloads for the survey frontend
- Forbidden: aggregation logic, direct SQL
"""
