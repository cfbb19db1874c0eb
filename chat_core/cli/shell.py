"""Interactive command shell.

Built on :mod:`cmd`: every ``do_<name>`` method is a command. The first
whitespace-delimited word of each line is the keyword; it is lower-cased in
:meth:`ChatShell.precmd`, so ``SEND`` and ``send`` are the same command, while
``send-x`` is an unknown one.
"""

from __future__ import annotations

import cmd
import sys
from typing import Optional, TextIO

from chat_core.config.settings import settings
from chat_core.dispatch.dispatcher import Dispatcher
from chat_core.domain.exceptions import DispatcherClosedError
from chat_core.infrastructure.logging.logger import logger
from chat_core.infrastructure.storage.memory_store import MessageStore

from .formatting import print_messages

HELP_TEXT = """Commands:
  send <UserID> <message...>  - send a message as UserID
  history                     - show all messages
  search user <UserID>        - show messages by a user
  search keyword <word>       - search messages by keyword
  users                       - list users who have posted
  help                        - show this help
  quit / exit                 - exit the program"""

SEND_USAGE = "Usage: send <UserID> <message...>"
SEARCH_USAGE = "Usage: search user <UserID>  OR  search keyword <word>"
UNKNOWN_SEARCH = "Unknown search subcommand. Use: user OR keyword"
UNKNOWN_COMMAND = "Unknown command. Type 'help' for commands."


class ChatShell(cmd.Cmd):
    prompt = "> "

    def __init__(
        self,
        store: MessageStore,
        dispatcher: Dispatcher,
        *,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        timestamp_format: Optional[str] = None,
    ) -> None:
        super().__init__(stdin=stdin, stdout=stdout)
        # input() only reads sys.stdin, so an explicit stream needs readline()
        if stdin is not None:
            self.use_rawinput = False
        self._store = store
        self._dispatcher = dispatcher
        self._stderr = stderr
        self._timestamp_format = timestamp_format or settings.timestamp_format

    def run(self) -> None:
        """Run the command loop until quit, end-of-input or a read failure."""
        try:
            self.cmdloop()
        except OSError as e:
            logger.error("input read failed", extra={"extra": {"error": str(e)}})
            self._err(f"\n[error] input error: {e}")
        except KeyboardInterrupt:
            logger.info("interrupted")
            self._say("\nExiting chat. Bye!")

    # ---- cmd.Cmd hooks ----
    def precmd(self, line: str) -> str:
        if line == "EOF":
            return line
        parts = line.strip().split(maxsplit=1)
        if not parts:
            return ""
        parts[0] = parts[0].lower()
        return " ".join(parts)

    def parseline(self, line: str):
        # 命令关键字只按空白切分；没有对应 do_* 的关键字由 onecmd 交给 default
        line = line.strip()
        if not line:
            return None, None, line
        if line.startswith("?"):
            line = "help " + line[1:]
        parts = line.split(maxsplit=1)
        return parts[0], (parts[1] if len(parts) > 1 else ""), line

    def emptyline(self) -> bool:
        return False

    def default(self, line: str) -> bool:
        logger.debug("unknown command", extra={"extra": {"line": line}})
        self._say(UNKNOWN_COMMAND)
        return False

    # ---- commands ----
    def do_help(self, arg: str) -> bool:
        self._say(HELP_TEXT)
        return False

    def do_send(self, arg: str) -> bool:
        parts = arg.split()
        if len(parts) < 2:
            self._say(SEND_USAGE)
            return False
        user_id, text = parts[0], " ".join(parts[1:])
        try:
            self._dispatcher.send(user_id, text)
        except DispatcherClosedError as e:
            self._say(f"[error] {e.message}")
        return False

    def do_history(self, arg: str) -> bool:
        print_messages(self._store.all(), self.stdout, self._timestamp_format)
        return False

    def do_search(self, arg: str) -> bool:
        parts = arg.split()
        if len(parts) < 2:
            self._say(SEARCH_USAGE)
            return False
        sub, term = parts[0].lower(), " ".join(parts[1:])
        if sub == "user":
            print_messages(self._store.filter_by_user(term), self.stdout, self._timestamp_format)
        elif sub == "keyword":
            print_messages(self._store.search_by_keyword(term), self.stdout, self._timestamp_format)
        else:
            self._say(UNKNOWN_SEARCH)
        return False

    def do_users(self, arg: str) -> bool:
        users = self._store.users()
        self._say("\n".join(users) if users else "No users yet.")
        return False

    def do_quit(self, arg: str) -> bool:
        self._say("Exiting chat. Bye!")
        return True

    do_exit = do_quit

    def do_EOF(self, arg: str) -> bool:
        logger.info("input closed (EOF)")
        self._err("\n[info] input closed (EOF). Exiting.")
        return True

    # ---- output ----
    def _say(self, text: str) -> None:
        self.stdout.write(text + "\n")
        self.stdout.flush()

    def _err(self, text: str) -> None:
        err = self._stderr or sys.stderr
        err.write(text + "\n")
        err.flush()
