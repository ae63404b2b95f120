"""
Pydantic schema definitions.

Schemas describe the data handed from the service layer to the
rendering layer.  They are kept apart from the store so the store can
change its internal representation freely.
"""
