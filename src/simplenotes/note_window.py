# SPDX-License-Identifier: GPL-3.0-or-later

import gi
gi.require_version('Gtk', '4.0')
gi.require_version('Adw', '1')

from gi.repository import Adw, Gdk, Gtk

from simplenotes.constants import UNTITLED_NOTE
from simplenotes.note_form import NoteForm


class NoteWindow(Adw.Window):
    """Detail form for a single note; also used to write a new one."""

    def __init__(self, application, store, note=None, **kwargs):
        super().__init__(
            application=application,
            modal=True,
            **kwargs,
        )
        self._store = store
        self._form = NoteForm(note)

        self.set_default_size(400, 500)
        self.set_title(
            'New Note' if self._form.is_new else (note.title or UNTITLED_NOTE)
        )

        self._build_ui()
        self._load_form()
        self._setup_key_controller()

    def _build_ui(self):
        main_box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL)

        header = Adw.HeaderBar()
        header.add_css_class('flat')

        self._save_btn = Gtk.Button(label='Save')
        self._save_btn.add_css_class('suggested-action')
        self._save_btn.connect('clicked', self._on_save)
        header.pack_end(self._save_btn)
        main_box.append(header)

        self._title_entry = Gtk.Entry(
            placeholder_text='Title',
        )
        self._title_entry.set_margin_start(12)
        self._title_entry.set_margin_end(12)
        self._title_entry.set_margin_top(6)
        main_box.append(self._title_entry)

        scrolled = Gtk.ScrolledWindow(
            vexpand=True, hexpand=True,
        )
        scrolled.set_margin_top(6)
        self._text_view = Gtk.TextView(
            wrap_mode=Gtk.WrapMode.WORD_CHAR,
            left_margin=12, right_margin=12,
            top_margin=8, bottom_margin=8,
        )
        self._buffer = self._text_view.get_buffer()
        scrolled.set_child(self._text_view)
        main_box.append(scrolled)

        self.set_content(main_box)

    def _load_form(self):
        self._title_entry.set_text(self._form.title)
        self._buffer.set_text(self._form.content)
        self._title_entry.connect('changed', self._on_field_changed)
        self._buffer.connect('changed', self._on_field_changed)
        self._update_save_sensitivity()

    def _on_field_changed(self, *args):
        self._form.title = self._title_entry.get_text()
        start, end = self._buffer.get_bounds()
        self._form.content = self._buffer.get_text(start, end, True)
        self._update_save_sensitivity()

    def _update_save_sensitivity(self):
        self._save_btn.set_sensitive(self._form.can_submit)

    def _setup_key_controller(self):
        key_ctrl = Gtk.EventControllerKey()
        key_ctrl.connect('key-pressed', self._on_key_pressed)
        self.add_controller(key_ctrl)

    def _on_key_pressed(self, controller, keyval, keycode, state):
        mods = state & Gtk.accelerator_get_default_mod_mask()
        if keyval == Gdk.KEY_Escape:
            self.close()
            return True
        if keyval == Gdk.KEY_s and mods == Gdk.ModifierType.CONTROL_MASK:
            if self._form.can_submit:
                self._on_save(self._save_btn)
            return True
        return False

    def _on_save(self, btn):
        self._form.submit(self._store)
        self.close()
