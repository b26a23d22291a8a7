"""
HTTP API package.

``router`` aggregates the per-collection routers under ``/api``;
``frontend`` serves the single-page application for everything else.
"""
