"""Inbound message routes."""

from typing import List, Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel

from nestorbot.domain.models import TextMessage, User
from nestorbot.response import capture_output

router = APIRouter(tags=["messages"])


class UserPayload(BaseModel):
    id: str
    name: Optional[str] = None
    room: Optional[str] = None


class ReceiveRequest(BaseModel):
    text: str
    user: Optional[UserPayload] = None
    room: Optional[str] = None


class ReceiveResponse(BaseModel):
    handled: bool
    finished: bool
    to_send: List[str]
    to_reply: List[str]


class HealthResponse(BaseModel):
    status: str
    listeners: int


@router.get("/healthz", response_model=HealthResponse)
async def healthz(request: Request):
    robot = request.app.state.robot
    return HealthResponse(status="ok", listeners=len(robot.listeners))


@router.post("/receive", response_model=ReceiveResponse)
async def receive(req: ReceiveRequest, request: Request):
    """Run one receive cycle and return the output buffered during it."""
    robot = request.app.state.robot

    user = User(**req.user.model_dump()) if req.user else None
    message = TextMessage(user=user, text=req.text, room=req.room)

    with capture_output() as output:
        handled = await robot.receive(message)
    return ReceiveResponse(
        handled=handled,
        finished=message.finished,
        to_send=output.to_send,
        to_reply=output.to_reply,
    )
