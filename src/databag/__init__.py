"""Data bag access layer.

This package models named data bags and resolves their items
from a configuration server or from local data bag roots.
"""
