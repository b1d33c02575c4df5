from pydantic import BaseModel
from typing import Any, Optional

# Fields are optional so a missing value reaches the core and comes back as
# a 400 "Missing required fields" instead of FastAPI's 422.

class RegisterUser(BaseModel):
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

class LoginUser(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None

class AddCardsRequest(BaseModel):
    # checked by the collection store, which answers "Cards must be an array"
    cards: Any = None
