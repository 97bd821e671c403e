# SPDX-License-Identifier: GPL-3.0-or-later

APP_ID = 'io.github.simplenotes.SimpleNotes'
APP_NAME = 'SimpleNotes'
APP_VERSION = '0.1.0'

SEED_NOTE_TITLE = 'Note title'
SEED_NOTE_CONTENT = 'Note text'

UNTITLED_NOTE = 'Untitled Note'
PREVIEW_MAX_CHARS = 80
