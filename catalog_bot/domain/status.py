"""Processing-status indicator around one event's dispatch.

Usage::

    async with ProcessingStatus(chat, event, apology) as status:
        ...                     # dispatch + send
        status.mark_failed()    # optional, for handled failures

On entry a pending reaction is attached. On exit a success or failure
reaction is attached and the pending reaction is removed, whatever
happened inside the block. Exceptions from the block are logged, answered
with the given apology and swallowed.
"""

import sys
import traceback
from typing import Optional

from catalog_bot.domain.models import Message, ProcessingState
from catalog_bot.ports.inbound import MentionEvent
from catalog_bot.ports.outbound import ChatPort


def _log(msg: str):
    print(msg, file=sys.stderr)


PENDING_REACTION = "floppy_disk"
SUCCESS_REACTION = "white_check_mark"
FAILURE_REACTION = "x"


class ProcessingStatus:
    def __init__(self, chat: ChatPort, event: MentionEvent, apology: Message):
        self._chat = chat
        self._event = event
        self._apology = apology
        self._pending_attached = False
        self.state: Optional[ProcessingState] = None

    def mark_failed(self):
        self.state = ProcessingState.FAILED

    async def __aenter__(self) -> "ProcessingStatus":
        self.state = ProcessingState.PENDING
        try:
            await self._chat.add_reaction(self._event.channel, self._event.ts, PENDING_REACTION)
            self._pending_attached = True
        except Exception as e:
            _log(f"[status] could not attach pending indicator to {self._event.ts}: {e}")
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        try:
            if exc is not None:
                _log(
                    f"[status] event {self._event.ts} failed: {exc}\n"
                    + "".join(traceback.format_exception(exc_type, exc, tb))
                )
                self.state = ProcessingState.FAILED
                await self._safely(
                    self._chat.post_message(self._event.channel, self._event.ts, self._apology),
                    "apology",
                )
            elif self.state is not ProcessingState.FAILED:
                self.state = ProcessingState.SUCCEEDED

            name = SUCCESS_REACTION if self.state is ProcessingState.SUCCEEDED else FAILURE_REACTION
            await self._safely(
                self._chat.add_reaction(self._event.channel, self._event.ts, name),
                f"{name} indicator",
            )
        finally:
            if self._pending_attached:
                self._pending_attached = False
                await self._safely(
                    self._chat.remove_reaction(self._event.channel, self._event.ts, PENDING_REACTION),
                    "pending removal",
                )
        return exc is None or isinstance(exc, Exception)

    async def _safely(self, call, what: str):
        try:
            await call
        except Exception as e:
            _log(f"[status] {what} failed for {self._event.ts}: {e}")
