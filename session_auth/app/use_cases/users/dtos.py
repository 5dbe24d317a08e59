"""
User Management Use Case DTOs
"""

from typing import Optional

from pydantic import BaseModel


class UpdateProfileCommand(BaseModel):
    """
    Partial profile update.

    Fields left out of the constructor are "unset" and are not touched;
    model_dump(exclude_unset=True) yields exactly the fields to apply.
    """

    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)
