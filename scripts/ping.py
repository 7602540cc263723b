"""Example listener script: answers pings and echoes text."""


def register_listeners(robot):
    def ping(response, done):
        response.send("PONG")
        done()

    def echo(response, done):
        response.reply(response.match.group(1))
        done()

    async def time_of_day(response, done):
        resp = await response.http("https://worldtimeapi.org/api/timezone/Etc/UTC").get()
        if resp.ok:
            response.send(resp.json()["datetime"])
        else:
            response.send("Could not reach the time service")

    robot.respond(r"ping$", ping)
    robot.respond(r"echo (.*)$", echo)
    robot.respond(r"time$", time_of_day)
