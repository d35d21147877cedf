# app/api/v1/routers/devices.py
from fastapi import APIRouter, Depends
from app.api.v1.deps import get_device_registry
from app.api.v1.responses import to_response
from app.schemas.device import RegisterTokenIn
from app.services.devices import DeviceAddressRegistry

router = APIRouter(prefix="/devices", tags=["devices"])

@router.post("/token")
async def register_token(body: RegisterTokenIn,
                         registry: DeviceAddressRegistry = Depends(get_device_registry)):
    """
    Store (or overwrite) the push device address of an existing user.

    Error codes:
        - VALIDATION_ERROR (400): userId or address/token missing
        - NOT_FOUND (404): no such user
    """
    result = await registry.set_address(body.userId, body.address)
    return to_response(result)
