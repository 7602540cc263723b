"""Build patterns that only match messages addressed to the bot."""

import re
from typing import Pattern, Union

# Either "BOTID: text" / "@BOTID, text" or the Slack mention "<@BOTID|name>: text".
_ADDRESS_PREFIX = r"^\s*@?(?:{bot}[:,]?|<@{bot}(?:\|[^>]*)?>:)\s*(?:{content})"

# Global inline flags such as "(?i)" must lead the whole expression
_INLINE_FLAGS = re.compile(r"^\(\?([aiLmsux]+)\)")
_FLAG_VALUES = {
    "a": re.ASCII,
    "i": re.IGNORECASE,
    "L": re.LOCALE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "u": re.UNICODE,
    "x": re.VERBOSE,
}


def _hoist_inline_flags(source: str, flags: int):
    match = _INLINE_FLAGS.match(source)
    while match:
        for letter in match.group(1):
            flags |= _FLAG_VALUES[letter]
        source = source[match.end():]
        match = _INLINE_FLAGS.match(source)
    return source, flags


def respond_pattern(pattern: Union[str, Pattern], bot_id: str) -> Pattern:
    """Wrap `pattern` so it matches only text directed at `bot_id`.

    Groups of `pattern` keep their positions: ``match[1]`` of the result is
    what ``match[1]`` of `pattern` would be against the stripped text.
    """
    if isinstance(pattern, str):
        source, flags = pattern, 0
    else:
        source, flags = pattern.pattern, pattern.flags

    source, flags = _hoist_inline_flags(source, flags)
    # already anchored after the address
    if source.startswith("^"):
        source = source[1:]

    bot = re.escape(bot_id)
    return re.compile(_ADDRESS_PREFIX.format(bot=bot, content=source), flags)
