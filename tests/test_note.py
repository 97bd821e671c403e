# SPDX-License-Identifier: GPL-3.0-or-later

import unittest
from datetime import datetime

from simplenotes.constants import UNTITLED_NOTE
from simplenotes.note import Note


class NoteTest(unittest.TestCase):
    def test_new_notes_get_distinct_ids(self) -> None:
        first = Note(title='a', content='b')
        second = Note(title='a', content='b')
        self.assertNotEqual(first.id, second.id)

    def test_created_at_defaults_to_now(self) -> None:
        before = datetime.now()
        note = Note(title='a', content='b')
        self.assertLessEqual(before, note.created_at)
        self.assertLessEqual(note.created_at, datetime.now())

    def test_title_and_content_are_mutable(self) -> None:
        note = Note(title='a', content='b')
        note.title = 'c'
        note.content = 'd'
        self.assertEqual((note.title, note.content), ('c', 'd'))

    def test_id_and_created_at_are_write_once(self) -> None:
        note = Note(title='a', content='b')
        with self.assertRaises(AttributeError):
            note.id = 'other'
        with self.assertRaises(AttributeError):
            note.created_at = datetime(2000, 1, 1)

    def test_display_title_falls_back_for_empty_title(self) -> None:
        self.assertEqual(Note(title='', content='x').display_title, UNTITLED_NOTE)
        self.assertEqual(Note(title='Groceries', content='x').display_title, 'Groceries')

    def test_preview_text_is_first_line(self) -> None:
        note = Note(title='t', content='milk\neggs\nbread')
        self.assertEqual(note.preview_text, 'milk')
        self.assertEqual(Note(title='t', content='').preview_text, '')


if __name__ == '__main__':
    unittest.main()
