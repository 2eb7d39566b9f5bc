"""Geocoding endpoint — free-text Thai address → coordinates + map link."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from floodhelp.application.use_cases.resolve_address import ResolveAddressUseCase
from floodhelp.domain.errors import InvalidInput, ProviderError
from floodhelp.infrastructure.api.dependencies import get_resolve_address_uc

logger = logging.getLogger(__name__)

router = APIRouter(tags=["geocoding"])


@router.post("/geocode-address")
async def geocode_address(
    request: Request,
    resolver: ResolveAddressUseCase = Depends(get_resolve_address_uc),
):
    """Resolve an address.

    An unmappable address is a normal 200 response with ``success: false``;
    only bad input (400) and provider failures (500) are errors.
    """
    try:
        payload = await request.json()
    except ValueError:
        return JSONResponse({"error": "Invalid JSON body"}, status_code=400)

    address = payload.get("address") if isinstance(payload, dict) else None

    try:
        result = await resolver.execute(address)
    except InvalidInput as e:
        return JSONResponse({"error": str(e)}, status_code=400)
    except ProviderError as e:
        logger.error("Error geocoding address: %s", e)
        return JSONResponse({"error": str(e)}, status_code=500)
    except Exception as e:
        logger.exception("Unexpected error geocoding address")
        return JSONResponse({"error": str(e) or "Unknown error"}, status_code=500)

    return result.to_response()
