# app/api/v1/routers/notifications.py
from fastapi import APIRouter, Depends
from app.api.v1.deps import get_notification_dispatcher
from app.api.v1.responses import to_response
from app.schemas.notification import RoutineNotifyIn
from app.services.notifications import NotificationDispatcher

router = APIRouter(prefix="/notifications", tags=["notifications"])

@router.post("/routine")
async def notify_routine(body: RoutineNotifyIn,
                         dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher)):
    """
    Push a routine notification from one user to another.

    Error codes:
        - VALIDATION_ERROR (400): a field is missing, or isPerformed is not a boolean
        - NOT_FOUND (404): receiver does not exist
        - NO_ADDRESS (400): receiver has no registered device token
        - GATEWAY_FAILURE (502): push provider rejected or could not be reached
    """
    result = await dispatcher.dispatch(body.fromUser, body.toUser, body.routineName, body.isPerformed)
    return to_response(result)
