"""FastAPI application wrapping a Robot."""

from fastapi import FastAPI

from nestorbot.adapters.web.routes import router
from nestorbot.config import __version__
from nestorbot.robot import Robot


def create_app(robot: Robot) -> FastAPI:
    app = FastAPI(title="Nestorbot", version=__version__)
    app.state.robot = robot
    app.include_router(router)
    return app
