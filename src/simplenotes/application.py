# SPDX-License-Identifier: GPL-3.0-or-later

import gi
gi.require_version('Gtk', '4.0')
gi.require_version('Adw', '1')

from gi.repository import Adw, Gio, Gtk

from simplenotes.constants import APP_ID, APP_NAME, APP_VERSION
from simplenotes.logger import configure_logging
from simplenotes.main_window import MainWindow
from simplenotes.note_store import NOTES_DELETED, NoteStore

_LOG = configure_logging().getChild('application')


class SimpleNotesApp(Adw.Application):

    def __init__(self, version=APP_VERSION, **kwargs):
        super().__init__(
            application_id=APP_ID,
            flags=Gio.ApplicationFlags.DEFAULT_FLAGS,
            **kwargs,
        )
        self.version = version
        self.store = None
        self._note_windows = {}
        self._store_handler = None

    def do_startup(self):
        Adw.Application.do_startup(self)
        self.store = NoteStore()
        self._store_handler = self.store.subscribe(self._on_store_changed)
        self._setup_actions()
        self._setup_shortcuts()
        _LOG.info('%s %s started', APP_NAME, self.version)

    def do_shutdown(self):
        if self._store_handler is not None:
            self.store.unsubscribe(self._store_handler)
            self._store_handler = None
        Adw.Application.do_shutdown(self)

    def _setup_actions(self):
        actions = [
            ('new-note', self._on_new_note),
            ('about', self._on_about),
            ('quit', self._on_quit),
            ('shortcuts', self._on_shortcuts),
        ]
        for name, callback in actions:
            action = Gio.SimpleAction.new(name, None)
            action.connect('activate', callback)
            self.add_action(action)

    def _setup_shortcuts(self):
        self.set_accels_for_action('app.new-note', ['<Control>n'])
        self.set_accels_for_action('app.quit', ['<Control>q'])
        self.set_accels_for_action('app.shortcuts', ['<Control>question'])

    def do_activate(self):
        win = self.get_active_window()
        if win and isinstance(win, MainWindow):
            win.present()
            return
        win = MainWindow(application=self, store=self.store)
        win.present()

    def open_note(self, note_id=None):
        """Open the editor for ``note_id``, or an empty editor when None."""
        from simplenotes.note_window import NoteWindow

        if note_id is not None and note_id in self._note_windows:
            self._note_windows[note_id].present()
            return

        note = None
        if note_id is not None:
            note = self.store.get_note(note_id)
            if note is None:
                return

        win = NoteWindow(
            application=self,
            store=self.store,
            note=note,
            transient_for=self.get_active_window(),
        )
        if note_id is not None:
            self._note_windows[note_id] = win
            win.connect('close-request', self._on_note_window_closed, note_id)
        win.present()

    def _on_note_window_closed(self, win, note_id):
        self._note_windows.pop(note_id, None)
        return False

    def close_note_window(self, note_id):
        win = self._note_windows.pop(note_id, None)
        if win:
            win.close()

    def _on_store_changed(self, event):
        if event.kind == NOTES_DELETED:
            for note_id in event.note_ids:
                self.close_note_window(note_id)

    def _on_new_note(self, action, param):
        self.open_note()

    def _on_about(self, action, param):
        about = Adw.AboutDialog(
            application_name=APP_NAME,
            application_icon=APP_ID,
            version=self.version,
            license_type=Gtk.License.GPL_3_0,
        )
        about.present(self.get_active_window())

    def _on_quit(self, action, param):
        for win in list(self._note_windows.values()):
            win.close()
        self.quit()

    def _on_shortcuts(self, action, param):
        from simplenotes.shortcuts import ShortcutsWindow
        win = ShortcutsWindow(transient_for=self.get_active_window())
        win.present()
