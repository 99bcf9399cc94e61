from pydantic import BaseModel, EmailStr, field_validator
from typing import Optional

class Token(BaseModel):
    access_token: str
    token_type: str
    usuario: dict

class Login(BaseModel):
    email: EmailStr
    password: str

    @field_validator('password')
    @classmethod
    def password_not_empty(cls, v):
        if not v:
            raise ValueError('La contraseña es obligatoria')
        return v

class SessionUser(BaseModel):
    id: str
    email: Optional[str] = None
