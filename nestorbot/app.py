"""Entry point: build a Robot from the environment and serve it."""

import logging

import uvicorn

from nestorbot.adapters.web import create_app
from nestorbot.config import RuntimeConfig
from nestorbot.robot import Robot


def build_robot(config: RuntimeConfig) -> Robot:
    robot = Robot(config.team_id, config.bot_id, debug_mode=config.debug_mode)
    loaded = robot.load(config.scripts_dir)
    robot.logger.info(
        "Robot %s ready: %d script(s), %d listener(s), debug_mode=%s",
        config.bot_id, len(loaded), len(robot.listeners), config.debug_mode,
    )
    return robot


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = RuntimeConfig.from_env()
    if not config.bot_id:
        logging.getLogger("nestorbot").warning("__NESTOR_BOT_ID is empty; respond() listeners will match unaddressed text")
    app = create_app(build_robot(config))
    uvicorn.run(app, host="0.0.0.0", port=config.port)


if __name__ == "__main__":
    main()
