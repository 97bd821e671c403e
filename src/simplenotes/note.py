# SPDX-License-Identifier: GPL-3.0-or-later

import uuid
from dataclasses import dataclass, field
from datetime import datetime

from simplenotes.constants import PREVIEW_MAX_CHARS, UNTITLED_NOTE

_IMMUTABLE_FIELDS = frozenset({'id', 'created_at'})


def _new_note_id() -> str:
    return str(uuid.uuid4())


@dataclass
class Note:
    title: str
    content: str
    id: str = field(default_factory=_new_note_id)
    created_at: datetime = field(default_factory=datetime.now)

    def __setattr__(self, name, value):
        # id and created_at are write-once
        if name in _IMMUTABLE_FIELDS and name in self.__dict__:
            raise AttributeError(f'Note.{name} cannot be changed')
        super().__setattr__(name, value)

    @property
    def display_title(self) -> str:
        return self.title or UNTITLED_NOTE

    @property
    def preview_text(self) -> str:
        """First line of the body, cut to a list-row friendly length."""
        if not self.content:
            return ''
        first_line = self.content.strip().split('\n', 1)[0]
        return first_line[:PREVIEW_MAX_CHARS]
