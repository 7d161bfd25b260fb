"""
Data layer for FootyHub.

Includes:
- Upstream payload schemas and validation (`schemas`)
"""
