# config_local.example.py

"""
Example local overrides.

Usage:
  1) Copy this file to `config_local.py`
  2) Adjust values for your machine
  3) Never commit `config_local.py` (it is gitignored)

Prefer `.env`. This file should contain only safe overrides.
"""

# Example: point the client at a local json-server
# API_BASE_URL = "http://localhost:3000"

# Example: load once and exit instead of opening the console
# CONSOLE_ENABLED = False
