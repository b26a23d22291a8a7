"""
FastAPI application package for the Blood Bank API.

Subpackages:

* ``core`` – configuration, logging and the MongoDB handle.
* ``schemas`` – pydantic request/response models.
* ``services`` – MongoDB operations per collection.
* ``api`` – HTTP routers.
"""
