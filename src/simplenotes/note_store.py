# SPDX-License-Identifier: GPL-3.0-or-later

import itertools
from dataclasses import dataclass, replace

from simplenotes.constants import SEED_NOTE_CONTENT, SEED_NOTE_TITLE
from simplenotes.logger import configure_logging
from simplenotes.note import Note

_LOG = configure_logging().getChild('note_store')

NOTES_ADDED = 'added'
NOTES_UPDATED = 'updated'
NOTES_DELETED = 'deleted'


class NoteIndexError(IndexError):
    """Raised when a delete targets positions outside the note list."""

    def __init__(self, positions, size):
        self.positions = sorted(positions)
        self.size = size
        super().__init__(
            f'note positions {self.positions} out of range for {size} notes'
        )


@dataclass(frozen=True)
class NoteStoreEvent:
    kind: str
    note_ids: tuple
    notes: tuple  # copies of the full ordered sequence after the change


class NoteStore:
    """In-memory, insertion-ordered collection of notes.

    Every applied mutation is announced synchronously to the callbacks
    registered with :meth:`subscribe`.
    """

    def __init__(self, seed=True):
        self._notes = []
        self._handlers = {}
        self._handler_ids = itertools.count(1)
        if seed:
            self._notes.append(Note(title=SEED_NOTE_TITLE, content=SEED_NOTE_CONTENT))

    def __len__(self):
        return len(self._notes)

    def __iter__(self):
        return iter(list(self._notes))

    # --- Observers ---

    def subscribe(self, callback) -> int:
        handler_id = next(self._handler_ids)
        self._handlers[handler_id] = callback
        return handler_id

    def unsubscribe(self, handler_id):
        del self._handlers[handler_id]

    def _notify(self, kind, note_ids):
        event = NoteStoreEvent(
            kind=kind,
            note_ids=tuple(note_ids),
            notes=tuple(replace(note) for note in self._notes),
        )
        for callback in list(self._handlers.values()):
            callback(event)

    # --- Notes CRUD ---

    def create_note(self, title='', content='') -> Note:
        note = Note(title=title, content=content)
        self._notes.append(note)
        _LOG.info('Created note %s', note.id)
        self._notify(NOTES_ADDED, [note.id])
        return note

    def get_note(self, note_id) -> Note | None:
        for note in self._notes:
            if note.id == note_id:
                return note
        return None

    def get_all_notes(self) -> list[Note]:
        return list(self._notes)

    def index_of(self, note_id) -> int | None:
        for index, note in enumerate(self._notes):
            if note.id == note_id:
                return index
        return None

    def update_note(self, note_id, title, content):
        note = self.get_note(note_id)
        if note is None:
            _LOG.debug('Ignoring update for unknown note %s', note_id)
            return
        note.title = title
        note.content = content
        _LOG.info('Updated note %s', note_id)
        self._notify(NOTES_UPDATED, [note_id])

    def delete_notes(self, indices) -> list[Note]:
        positions = set(indices)
        for i in positions:
            if isinstance(i, bool) or not isinstance(i, int):
                raise TypeError(f'note positions must be integers, not {i!r}')
        size = len(self._notes)
        invalid = {i for i in positions if not 0 <= i < size}
        if invalid:
            raise NoteIndexError(invalid, size)
        if not positions:
            return []

        removed = [self._notes[i] for i in sorted(positions)]
        for i in sorted(positions, reverse=True):
            del self._notes[i]
        _LOG.info('Deleted %d note(s)', len(removed))
        self._notify(NOTES_DELETED, [note.id for note in removed])
        return removed
