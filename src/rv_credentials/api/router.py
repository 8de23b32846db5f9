"""rv_credentials REST endpoints.

GET    /credential   — {configured: bool}; never returns the key
PUT    /credential   — store the key
DELETE /credential   — remove the key
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.rv_common.response import ApiResponse, success_response
from src.rv_credentials.application.gateway import CredentialGateway
from src.rv_credentials.application.schemas import CredentialStatus, SetCredentialRequest
from src.rv_credentials.application.service import get_credential_gateway

router = APIRouter(prefix="/credential", tags=["credential"])


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


@router.get("")
async def get_credential_status(
    request: Request,
    gateway: Annotated[CredentialGateway, Depends(get_credential_gateway)],
) -> ApiResponse:
    status = CredentialStatus(configured=await gateway.is_configured())
    return success_response(status.model_dump(), _request_id(request))


@router.put("")
async def set_credential(
    body: SetCredentialRequest,
    request: Request,
    gateway: Annotated[CredentialGateway, Depends(get_credential_gateway)],
) -> ApiResponse:
    await gateway.set(body.api_key.get_secret_value())
    return success_response(CredentialStatus(configured=True).model_dump(), _request_id(request))


@router.delete("")
async def delete_credential(
    request: Request,
    gateway: Annotated[CredentialGateway, Depends(get_credential_gateway)],
) -> ApiResponse:
    await gateway.delete()
    return success_response(CredentialStatus(configured=False).model_dump(), _request_id(request))
