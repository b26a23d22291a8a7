"""
Service layer.

Each service encapsulates the MongoDB operations for one collection.
Services receive the ``Database`` handle from the caller, so the API
handlers (and tests) decide which database they talk to.
"""
