"""
Boundary layer for external system integrations.

Handles all interactions with external systems (object storage, vector index,
foundation models). Provides adapters and clients for infrastructure dependencies.
"""
