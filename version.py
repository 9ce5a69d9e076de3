"""
version.py — TRANSPORTDESK
===========================
Single source of truth for the version number.
Used by:
  - pyproject.toml (dynamic version)
  - the CLI (--version)
"""

APP_NAME = "TRANSPORTDESK"
VERSION  = "1.0.0"
BUILD    = "2026.10.19"
