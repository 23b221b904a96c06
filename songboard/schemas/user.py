# ============================================================================
# FILE: songboard/schemas/user.py
# ============================================================================
from pydantic import BaseModel
from typing import Optional

class LoginRequest(BaseModel):
    """Schema for nickname login"""
    nickname: Optional[str] = None

class UserResponse(BaseModel):
    """Schema for user response"""
    id: int
    nickname: str
    
    class Config:
        from_attributes = True

class MessageResponse(BaseModel):
    message: str
