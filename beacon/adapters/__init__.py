"""Adapter package for external I/O implementations.

Purpose:
    Concrete implementations of the domain ports: the REST event repository,
    an in-memory repository for offline use and tests, and a back-stack
    navigator.

Dependencies:
    The REST adapter depends on ``requests``; the others are pure Python.
"""
