"""Storage layer for ledger state.

This module persists the ledger state aggregate to the data root
and exposes the SDK client that keeps it durable across restarts.
"""
