"""
Routes des messages de canaux.

GET /channels/{channel_id}/messages expose aussi les messages supprimés,
avec leur deleted_at.
"""

from fastapi import APIRouter, Depends, status

from ...services import MessagesService
from ..deps import get_messages_service
from ..schemas import (
    GetMessagesResponse,
    MessageInfoResponse,
    SendMessageRequest,
    SendMessageResponse,
)

router = APIRouter(tags=["messages"])


@router.post(
    "/channels/{channel_id}/messages",
    response_model=SendMessageResponse,
    status_code=status.HTTP_201_CREATED,
)
def send_message(
    channel_id: str,
    req: SendMessageRequest,
    service: MessagesService = Depends(get_messages_service),
):
    message_id = service.send_message(
        req.author_id, channel_id, req.content, tenancy=req.tenancy
    )
    return SendMessageResponse(id=message_id)


@router.get(
    "/channels/{channel_id}/messages",
    response_model=GetMessagesResponse,
    response_model_exclude_none=True,
)
def get_messages(channel_id: str, service: MessagesService = Depends(get_messages_service)):
    return GetMessagesResponse(
        messages=[
            MessageInfoResponse.model_validate(info)
            for info in service.get_messages(channel_id)
        ]
    )


@router.delete("/messages/{message_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_message(
    message_id: str, service: MessagesService = Depends(get_messages_service)
) -> None:
    service.delete_message(message_id)
