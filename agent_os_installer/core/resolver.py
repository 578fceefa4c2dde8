"""
Decides whether an existing file should be overwritten.
"""

import logging
from collections.abc import Callable
from enum import Enum
from pathlib import Path

from agent_os_installer.models.session import SessionState

log = logging.getLogger(__name__)

OVERWRITE_PROMPT = "Overwrite? [y]es, [n]o, [a]ll, [s]kip all: "

# Receives the existing path, returns the user's raw answer.
AskFunc = Callable[[Path], str]


class OverwriteChoice(str, Enum):
    YES = "yes"
    NO = "no"
    ALL = "all"
    SKIP_ALL = "skip-all"


_RESPONSES = {
    "y": OverwriteChoice.YES,
    "yes": OverwriteChoice.YES,
    "a": OverwriteChoice.ALL,
    "all": OverwriteChoice.ALL,
    "s": OverwriteChoice.SKIP_ALL,
    "skip": OverwriteChoice.SKIP_ALL,
    "skip-all": OverwriteChoice.SKIP_ALL,
    "skip all": OverwriteChoice.SKIP_ALL,
}


def parse_response(response: str | None) -> OverwriteChoice:
    """Maps a raw answer to a choice; anything unrecognized means "no"."""
    if not response:
        return OverwriteChoice.NO
    return _RESPONSES.get(" ".join(response.split()).lower(), OverwriteChoice.NO)


def resolve_overwrite(path: Path, session: SessionState, ask: AskFunc) -> bool:
    """
    Returns True if the existing file at `path` should be overwritten.

    Force mode and the sticky "all" / "skip all" answers short-circuit without
    calling `ask`. Otherwise `ask` is called exactly once, and an "all" or
    "skip all" answer is latched on `session` for the remaining files.
    """
    if session.is_sticky:
        # force and "all" overwrite; only "skip all" leaves the file alone.
        return session.force_mode or session.overwrite_all

    choice = parse_response(ask(path))
    log.debug(f"Overwrite answer for '{path}': {choice.value}")

    if choice is OverwriteChoice.ALL:
        session.overwrite_all = True
        return True
    if choice is OverwriteChoice.SKIP_ALL:
        session.skip_all = True
        return False
    return choice is OverwriteChoice.YES
