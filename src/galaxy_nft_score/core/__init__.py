"""Core business logic: data models, source clients, reconciliation and scoring.

This module is framework-agnostic. The hosting snapshot framework only ever
sees the ``strategy`` coroutine; everything it calls lives here.
"""
