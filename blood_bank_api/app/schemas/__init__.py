"""
Pydantic schema definitions for API payloads.

Each collection (donors, inventory, requests) defines its own models
for request bodies, stored documents and response envelopes.  Schemas
are kept apart from the services that read and write MongoDB.
"""
