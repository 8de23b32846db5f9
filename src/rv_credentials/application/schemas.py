"""Pydantic request/response schemas for rv_credentials.

The secret itself is accepted on input only; no response ever carries it.
"""

from pydantic import BaseModel, Field, SecretStr


class SetCredentialRequest(BaseModel):
    api_key: SecretStr = Field(..., description="Stripe secret key, e.g. sk_live_…")


class CredentialStatus(BaseModel):
    configured: bool
