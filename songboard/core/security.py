# ============================================================================
# FILE: songboard/core/security.py
# ============================================================================
import secrets

SESSION_TOKEN_BYTES = 32

def create_session_token() -> str:
    """Opaque, unguessable session token (64 hex characters)"""
    return secrets.token_hex(SESSION_TOKEN_BYTES)
