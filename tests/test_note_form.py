# SPDX-License-Identifier: GPL-3.0-or-later

import unittest

from simplenotes.note_form import NoteForm
from simplenotes.note_store import NoteStore


class NoteFormTest(unittest.TestCase):
    def setUp(self) -> None:
        self.store = NoteStore(seed=False)

    def test_empty_form_is_new_and_not_submittable(self) -> None:
        form = NoteForm()
        self.assertTrue(form.is_new)
        self.assertEqual((form.title, form.content), ('', ''))
        self.assertFalse(form.can_submit)

    def test_either_empty_field_blocks_submit(self) -> None:
        form = NoteForm()
        form.title = 'Title'
        self.assertFalse(form.can_submit)
        form.title, form.content = '', 'Body'
        self.assertFalse(form.can_submit)
        form.title = 'Title'
        self.assertTrue(form.can_submit)

    def test_submit_rejects_incomplete_form(self) -> None:
        form = NoteForm()
        form.title = 'Title'
        with self.assertRaises(ValueError):
            form.submit(self.store)
        self.assertEqual(len(self.store), 0)

    def test_submit_new_form_adds_note(self) -> None:
        form = NoteForm()
        form.title, form.content = 'A', 'a'
        note = form.submit(self.store)
        self.assertEqual(self.store.get_all_notes(), [note])
        self.assertEqual(form.note_id, note.id)
        self.assertFalse(form.is_new)

    def test_form_for_existing_note_is_prefilled_and_updates(self) -> None:
        note = self.store.create_note('A', 'a')
        self.store.create_note('B', 'b')
        form = NoteForm(note)
        self.assertEqual((form.title, form.content), ('A', 'a'))
        form.title = 'A2'
        updated = form.submit(self.store)
        self.assertIs(updated, note)
        self.assertEqual(len(self.store), 2)
        self.assertEqual([n.title for n in self.store], ['A2', 'B'])

    def test_submit_for_deleted_note_changes_nothing(self) -> None:
        note = self.store.create_note('A', 'a')
        form = NoteForm(note)
        self.store.delete_notes({0})
        form.content = 'edited'
        self.assertIsNone(form.submit(self.store))
        self.assertEqual(len(self.store), 0)


if __name__ == '__main__':
    unittest.main()
