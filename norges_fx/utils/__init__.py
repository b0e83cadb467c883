"""Shared helpers for :mod:`norges_fx`."""
