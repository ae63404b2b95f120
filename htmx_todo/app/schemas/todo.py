"""
Pydantic model for a single todo entry.

A todo is nothing more than a short piece of text together with an
opaque identifier generated by the server.  The identifier is used as
the DOM id of the rendered item and as the path parameter of the
delete endpoint.
"""

from pydantic import BaseModel, Field


class TodoItem(BaseModel):
    """Schema for a todo entry as exposed to the rendering layer."""

    id: str = Field(..., description="Server generated identifier (UUID4 string)")
    text: str = Field(..., min_length=1, description="Todo text as entered by the user")

    model_config = {
        "frozen": True,
    }
