from pydantic import BaseModel


class LoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    success: bool = True
    message: str = "Login successful"


class AuthStatus(BaseModel):
    authenticated: bool
