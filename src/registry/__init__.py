"""Dataset registration ledger.

This package holds the ledger state aggregate and the components that
validate, register, update, and deactivate datasets against it.
"""
