"""Script loader — imports listener scripts from disk and registers them.

A script is a Python file exposing ``register_listeners(robot)``.
"""

import importlib.util
from pathlib import Path
from typing import Any, List, Union

from nestorbot.ports.inbound import ListenerScript


def load_file(robot: Any, path: Union[str, Path], filename: str) -> bool:
    """Load one script and let it register its listeners on `robot`.

    Returns True when the script registered, False when it was skipped.
    Skipped scripts are logged through ``robot.logger``; nothing is raised.
    """
    full_path = Path(path) / filename
    module_name = Path(filename).stem

    spec = importlib.util.spec_from_file_location(module_name, full_path)
    if spec is None or spec.loader is None:
        robot.logger.warning("Cannot load script %s: not a Python module", full_path)
        return False

    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        robot.logger.error("Unable to load %s: %s", full_path, e)
        return False

    if isinstance(module, ListenerScript) and callable(module.register_listeners):
        module.register_listeners(robot)
        robot.logger.debug("Loaded script %s", full_path)
        return True

    robot.logger.warning(
        "Expected %s to define a register_listeners(robot) function", full_path
    )
    return False


def load_directory(robot: Any, path: Union[str, Path]) -> List[str]:
    """Load every ``*.py`` script in `path`, in name order.

    Files starting with an underscore are ignored. Returns the names of
    scripts that registered successfully.
    """
    directory = Path(path)
    if not directory.is_dir():
        robot.logger.warning("Scripts directory %s does not exist", directory)
        return []

    loaded = []
    for script in sorted(directory.glob("*.py")):
        if script.name.startswith("_"):
            continue
        if load_file(robot, directory, script.name):
            loaded.append(script.stem)
    return loaded
