"""Keyed record store exposed over HTTP."""
