# SPDX-License-Identifier: GPL-3.0-or-later

import gi
gi.require_version('Gtk', '4.0')
from gi.repository import Gtk


class ShortcutsWindow(Gtk.ShortcutsWindow):

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        section = Gtk.ShortcutsSection(visible=True, section_name='shortcuts')

        general = Gtk.ShortcutsGroup(title='General', visible=True)
        general.append(Gtk.ShortcutsShortcut(
            title='New Note',
            accelerator='<Control>n',
            visible=True,
        ))
        general.append(Gtk.ShortcutsShortcut(
            title='Quit',
            accelerator='<Control>q',
            visible=True,
        ))
        general.append(Gtk.ShortcutsShortcut(
            title='Keyboard Shortcuts',
            accelerator='<Control>question',
            visible=True,
        ))
        section.append(general)

        selection = Gtk.ShortcutsGroup(title='Selection Mode', visible=True)
        selection.append(Gtk.ShortcutsShortcut(
            title='Delete Selected Notes',
            accelerator='Delete',
            visible=True,
        ))
        selection.append(Gtk.ShortcutsShortcut(
            title='Leave Selection Mode',
            accelerator='Escape',
            visible=True,
        ))
        section.append(selection)

        editor = Gtk.ShortcutsGroup(title='Note Editor', visible=True)
        editor.append(Gtk.ShortcutsShortcut(
            title='Save Note',
            accelerator='<Control>s',
            visible=True,
        ))
        editor.append(Gtk.ShortcutsShortcut(
            title='Close Without Saving',
            accelerator='Escape',
            visible=True,
        ))
        section.append(editor)

        self.add_section(section)
