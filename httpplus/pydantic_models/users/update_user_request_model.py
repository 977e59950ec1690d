from typing import Optional
from pydantic import BaseModel


'''Partial update: only the fields that are set are sent'''


class UpdateUserRequestModel(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
