"""Interpreting chat text: fun keywords, PC tasks and help commands."""

from __future__ import annotations

import logging
import os
import time
from enum import Enum, auto
from typing import Callable

from .quotes import QuoteBook
from .sysutil import get_cpu_load
from .users import User

log = logging.getLogger(__name__)

SendFunction = Callable[[int, str], None]
Action = Callable[[], bool]


class Task(Enum):
    """Privileged operations on the host machine."""

    LOCK_PC = auto()
    BLOCK_INPUT = auto()
    UNBLOCK_INPUT = auto()
    TURN_OFF_BOT = auto()
    GET_CPU_USAGE = auto()
    GET_CPU_CORES = auto()


class BotKeyword(Enum):
    """Whole messages the bot reacts to; the value is the exact lower-case text."""

    HELLO = "hello"
    HI = "hi"
    Q = "q"
    QUOTE = "quote"
    FUCK_YOU = "fuck you"
    YOU_UP = "you up"
    YOU_UP_Q = "you up?"
    U_UP = "u up"
    U_UP_Q = "u up?"
    DID_YOU_HIT_HER = "did you hit her?"
    CPU = "cpu"
    CORES = "cores"
    LOCK = "lock"
    BLOCK = "block"
    UNBLOCK = "unblock"
    QUIT = "quit"


class BotCommand(Enum):
    """Message prefixes that take an argument."""

    HALP = "halp"
    HELP = "help"


class HelpType(Enum):
    FUN = auto()
    PC = auto()
    GENERAL = auto()


class CannedMessage(Enum):
    ERROR_OCCURRED = auto()
    NO_PERMISSION = auto()


_CANNED = {
    CannedMessage.ERROR_OCCURRED: "Oh dear, it seems an error has occurred ¯\\_(ツ)_/¯",
    CannedMessage.NO_PERMISSION: "Ah ah ah! You didn't say the magic word! Ah ah ah!",
}

_HELP = {
    HelpType.FUN: [
        "Use any of the following commands:",
        "'hello'/'hi'",
        "'q'/'quote'",
        "'fuck you'",
        "'you up'/'u up'",
        "'did you hit her?'",
    ],
    HelpType.PC: [
        "Use any of the following commands:",
        "'cpu'*",
        "'core'*",
        "'cores'*",
        "'lock'*",
        "'block'*",
        "'unlock'*",
        "'quit'*",
        "* requires permissions",
    ],
    HelpType.GENERAL: [
        "Help is on the wae",
        "Use:",
        "'help fun' for help about fun commands",
        "'help pc' for help about PC commands",
    ],
}

_HELP_TOPICS = {"fun": HelpType.FUN, "pc": HelpType.PC}

_GREETINGS = {BotKeyword.HELLO, BotKeyword.HI}
_QUOTES = {BotKeyword.Q, BotKeyword.QUOTE}
_UP = {BotKeyword.YOU_UP, BotKeyword.YOU_UP_Q, BotKeyword.U_UP, BotKeyword.U_UP_Q}

_KEYWORD_TASKS = {
    BotKeyword.CPU: Task.GET_CPU_USAGE,
    BotKeyword.CORES: Task.GET_CPU_CORES,
    BotKeyword.LOCK: Task.LOCK_PC,
    BotKeyword.BLOCK: Task.BLOCK_INPUT,
    BotKeyword.UNBLOCK: Task.UNBLOCK_INPUT,
    BotKeyword.QUIT: Task.TURN_OFF_BOT,
}


def lookup_keyword(text: str) -> BotKeyword | None:
    """The keyword matching ``text`` exactly, or None."""
    try:
        return BotKeyword(text)
    except ValueError:
        return None


def find_command(text: str) -> BotCommand | None:
    """The first command that ``text`` starts with, or None."""
    return next((command for command in BotCommand if text.startswith(command.value)), None)


def get_message(kind: CannedMessage) -> str:
    return _CANNED[kind]


def get_help(help_type: HelpType) -> str:
    return "\n".join(_HELP[help_type])


def _unsupported() -> bool:
    return False


class MessageProcessor:
    """Answers incoming chat text; the first message from the owner logs them in."""

    def __init__(
        self,
        send: SendFunction,
        owner_username: str,
        *,
        quotes: QuoteBook | None = None,
        cpu_load: Callable[[], float] = get_cpu_load,
        cpu_count: Callable[[], int] | None = None,
        lock_pc: Action = _unsupported,
        block_input: Action = _unsupported,
        unblock_input: Action = _unsupported,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._send = send
        self.owner_username = owner_username
        self.my_chat_id = -1
        self._quotes = quotes if quotes is not None else QuoteBook()
        self._cpu_load = cpu_load
        self._cpu_count = cpu_count if cpu_count is not None else (lambda: os.cpu_count() or 1)
        self._actions: dict[Task, tuple[Action, str]] = {
            Task.LOCK_PC: (lock_pc, "PC has been locked"),
            Task.BLOCK_INPUT: (block_input, "PC input has been blocked"),
            Task.UNBLOCK_INPUT: (unblock_input, "PC input has been unblocked"),
        }
        self._sleep = sleep

    def is_logged_in(self) -> bool:
        return self.my_chat_id != -1

    def has_permissions(self, chat_id: int, send_if_not_allowed: bool = False) -> bool:
        """Whether ``chat_id`` is the owner's chat; optionally tell it off if not."""
        allowed = self.is_logged_in() and self.my_chat_id == chat_id
        if send_if_not_allowed and not allowed:
            self._send(chat_id, get_message(CannedMessage.NO_PERMISSION))
        return allowed

    def _cpu_usage(self) -> str:
        return str(int(self._cpu_load() * 100))

    def do_task(self, task: Task, chat_id: int) -> None:
        """Run a privileged task; exits the program for TURN_OFF_BOT."""
        if not self.has_permissions(chat_id, True):
            return
        if task is Task.TURN_OFF_BOT:
            self._send(self.my_chat_id, "Bye bye! ヾ(°∇°*)")
            raise SystemExit(0)
        if task in self._actions:
            action, done = self._actions[task]
            reply = done if action() else get_message(CannedMessage.ERROR_OCCURRED)
        elif task is Task.GET_CPU_USAGE:
            reply = f"CPU usage is {self._cpu_usage()}%"
        else:
            reply = f"CPU has {self._cpu_count()} logical cores"
        self._send(self.my_chat_id, reply)

    def _refuse(self, user: User) -> None:
        self._send(user.id, f"I'm sorry {user.firstname}, I'm afraid I can't do that")

    def _handle_keyword(self, keyword: BotKeyword, user: User) -> None:
        if keyword in _GREETINGS:
            self._send(user.id, "Hi! \\o")
        elif keyword in _QUOTES:
            self._send(user.id, self._quotes.random_quote())
        elif keyword is BotKeyword.FUCK_YOU:
            self._send(user.id, "No, fuck YOU!")
            self._sleep(1.0)
            self._send(user.id, ".|.")
        elif keyword in _UP:
            self._send(user.id, "For you, I'm always up ;)")
        elif keyword is BotKeyword.DID_YOU_HIT_HER:
            self._send(user.id, "I did not hit her, I did not.")
            self._sleep(1.5)
            self._send(user.id, f"Oh, hi {user.firstname}")
        else:
            self.do_task(_KEYWORD_TASKS[keyword], user.id)

    def process_new_message(self, user: User, text: str) -> None:
        """React to one text message from ``user``."""
        lower = text.lower()
        log.debug("Message %s", text)

        if not self.is_logged_in() and user.username == self.owner_username:
            self._send(user.id, f"Oh, hi {user.firstname}")
            self.my_chat_id = user.id
            if lower in ("hello", "hi"):
                return

        keyword = lookup_keyword(lower)
        if keyword is not None:
            self._handle_keyword(keyword, user)
            return

        command = find_command(lower)
        if command is None:
            self._refuse(user)
            return
        argument = lower[len(command.value) + 1:]
        self._send(user.id, get_help(_HELP_TOPICS.get(argument, HelpType.GENERAL)))