# SPDX-License-Identifier: GPL-3.0-or-later


class NoteForm:
    """Editing state behind the note window.

    A form opened on an existing note updates that note on submit; a form
    opened without one creates a new note.
    """

    def __init__(self, note=None):
        self.note_id = note.id if note is not None else None
        self.title = note.title if note is not None else ''
        self.content = note.content if note is not None else ''

    @property
    def is_new(self) -> bool:
        return self.note_id is None

    @property
    def can_submit(self) -> bool:
        return bool(self.title) and bool(self.content)

    def submit(self, store):
        if not self.can_submit:
            raise ValueError('a note needs both a title and content')
        if self.is_new:
            note = store.create_note(self.title, self.content)
            self.note_id = note.id
            return note
        store.update_note(self.note_id, self.title, self.content)
        return store.get_note(self.note_id)
