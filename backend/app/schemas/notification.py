# app/schemas/notification.py
"""
Pydantic schemas for routine notifications.
"""
from typing import Optional, Union

from pydantic import BaseModel, StrictBool, StrictStr


class RoutineNotifyIn(BaseModel):
    """
    Request model for a routine notification.
    isPerformed may be a JSON boolean or the strings "true"/"false"; leaving it out is an error.
    """
    fromUser: Optional[str] = None  # Sender user id
    toUser: Optional[str] = None  # Receiver user id
    routineName: Optional[str] = None  # Routine name, shown verbatim
    isPerformed: Union[StrictBool, StrictStr, None] = None  # no int coercion: 1 and 0 are rejected
