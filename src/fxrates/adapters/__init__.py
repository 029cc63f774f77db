"""
Adapters Layer - External Integrations

This package contains adapters for external systems:
- Providers (reference rate feeds)
- Sinks (row destinations)
"""
