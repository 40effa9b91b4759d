from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel

class UserCreate(BaseModel):
    # Stored exactly as given so login can match it byte for byte.
    email: str = Field(..., min_length=1, description="Login email, unique across users")
    password: str = Field(..., min_length=1, description="Plaintext password")

class UserLogin(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

class UserResponse(BaseModel):
    id: int
    email: str

    model_config = ConfigDict(from_attributes=True)

class TokenResponse(BaseModel):
    access_token: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
