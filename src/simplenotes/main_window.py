# SPDX-License-Identifier: GPL-3.0-or-later

import gi
gi.require_version('Gtk', '4.0')
gi.require_version('Adw', '1')

from gi.repository import Adw, Gdk, Gio, Gtk

from simplenotes.constants import APP_ID, APP_NAME
from simplenotes.logger import configure_logging
from simplenotes.note_store import NoteIndexError

_LOG = configure_logging().getChild('main_window')


class NoteRow(Adw.ActionRow):
    """List row showing a note title, remembering which note it renders."""

    def __init__(self, note, **kwargs):
        super().__init__(
            title=note.display_title,
            subtitle=note.preview_text,
            activatable=True,
            use_markup=False,
            **kwargs,
        )
        self.set_title_lines(1)
        self.set_subtitle_lines(1)
        self.note_id = note.id
        self.popover = None


class MainWindow(Adw.ApplicationWindow):

    def __init__(self, store, **kwargs):
        super().__init__(**kwargs)
        self._app = self.get_application()
        self._store = store
        self._selection_mode = False

        self.set_title(APP_NAME)
        self.set_default_size(420, 640)
        self.set_icon_name(APP_ID)

        self._build_ui()
        self._setup_key_controller()
        self._store_handler = self._store.subscribe(self._on_store_changed)
        self.connect('close-request', self._on_close_request)
        self._refresh_notes()

    def _build_ui(self):
        self._toolbar_view = Adw.ToolbarView()

        # --- Normal header bar ---
        self._header = Adw.HeaderBar()
        self._header.set_title_widget(Adw.WindowTitle(title='Notes'))

        new_btn = Gtk.Button(
            icon_name='document-new-symbolic',
            tooltip_text='New Note (Ctrl+N)',
        )
        new_btn.connect('clicked', lambda b: self._app.activate_action('new-note'))
        self._header.pack_start(new_btn)

        menu = Gio.Menu()
        menu.append('Keyboard Shortcuts', 'app.shortcuts')
        menu.append(f'About {APP_NAME}', 'app.about')
        menu_btn = Gtk.MenuButton(
            icon_name='open-menu-symbolic',
            menu_model=menu,
        )
        self._header.pack_end(menu_btn)

        self._select_btn = Gtk.Button(
            icon_name='selection-mode-symbolic',
            tooltip_text='Select Notes',
        )
        self._select_btn.connect('clicked', lambda b: self._enter_selection_mode())
        self._header.pack_end(self._select_btn)

        self._toolbar_view.add_top_bar(self._header)

        # --- Selection header bar (hidden by default) ---
        self._selection_header = Adw.HeaderBar()
        self._selection_header.set_visible(False)
        self._selection_header.set_show_back_button(False)
        self._selection_header.set_show_end_title_buttons(False)

        cancel_btn = Gtk.Button(label='Cancel')
        cancel_btn.connect('clicked', lambda b: self._exit_selection_mode())
        self._selection_header.pack_start(cancel_btn)

        self._selection_count_label = Gtk.Label(label='0 selected')
        self._selection_header.set_title_widget(self._selection_count_label)

        self._sel_delete_btn = Gtk.Button(label='Delete')
        self._sel_delete_btn.add_css_class('destructive-action')
        self._sel_delete_btn.connect('clicked', self._on_bulk_delete)
        self._selection_header.pack_end(self._sel_delete_btn)

        self._toolbar_view.add_top_bar(self._selection_header)

        # Notes list
        notes_scroll = Gtk.ScrolledWindow(vexpand=True)
        self._notes_list = Gtk.ListBox(
            selection_mode=Gtk.SelectionMode.NONE,
        )
        self._notes_list.add_css_class('boxed-list')
        self._notes_list.set_margin_start(12)
        self._notes_list.set_margin_end(12)
        self._notes_list.set_margin_top(12)
        self._notes_list.set_margin_bottom(12)
        self._notes_list.set_valign(Gtk.Align.START)
        self._notes_list.connect('row-activated', self._on_row_activated)
        self._notes_list.connect('selected-rows-changed', self._on_selection_changed)
        notes_scroll.set_child(self._notes_list)

        # Empty state
        self._empty_state = Adw.StatusPage(
            icon_name='document-new-symbolic',
            title='No Notes',
            description='Press Ctrl+N to write a note',
        )

        self._notes_stack = Gtk.Stack()
        self._notes_stack.add_named(notes_scroll, 'list')
        self._notes_stack.add_named(self._empty_state, 'empty')

        self._toast_overlay = Adw.ToastOverlay()
        self._toast_overlay.set_child(self._notes_stack)
        self._toolbar_view.set_content(self._toast_overlay)

        self.set_content(self._toolbar_view)

    def _setup_key_controller(self):
        key_ctrl = Gtk.EventControllerKey()
        key_ctrl.set_propagation_phase(Gtk.PropagationPhase.CAPTURE)
        key_ctrl.connect('key-pressed', self._on_key_pressed)
        self.add_controller(key_ctrl)

    def _on_key_pressed(self, controller, keyval, keycode, state):
        if not self._selection_mode:
            return False
        if keyval == Gdk.KEY_Escape:
            self._exit_selection_mode()
            return True
        if keyval == Gdk.KEY_Delete:
            self._on_bulk_delete(self._sel_delete_btn)
            return True
        return False

    def _on_store_changed(self, event):
        self._refresh_notes()

    def _on_close_request(self, win):
        if self._store_handler is not None:
            self._store.unsubscribe(self._store_handler)
            self._store_handler = None
        return False

    # --- Selection mode ---

    def _enter_selection_mode(self):
        if self._selection_mode:
            return
        self._selection_mode = True
        self._notes_list.set_selection_mode(Gtk.SelectionMode.MULTIPLE)
        self._notes_list.set_activate_on_single_click(False)
        self._header.set_visible(False)
        self._selection_header.set_visible(True)
        self._update_selection_visuals()

    def _exit_selection_mode(self):
        if not self._selection_mode:
            return
        self._selection_mode = False
        self._notes_list.unselect_all()
        self._notes_list.set_selection_mode(Gtk.SelectionMode.NONE)
        self._notes_list.set_activate_on_single_click(True)
        self._header.set_visible(True)
        self._selection_header.set_visible(False)

    def _on_selection_changed(self, listbox):
        if self._selection_mode:
            self._update_selection_visuals()

    def _update_selection_visuals(self):
        count = len(self._notes_list.get_selected_rows())
        self._selection_count_label.set_label(f'{count} selected')
        self._sel_delete_btn.set_sensitive(count > 0)

    # --- Actions ---

    def _on_row_activated(self, listbox, row):
        if self._selection_mode:
            return
        self._app.open_note(row.note_id)

    def _on_bulk_delete(self, btn):
        positions = {row.get_index() for row in self._notes_list.get_selected_rows()}
        if not positions:
            return
        self._exit_selection_mode()
        self._delete_positions(positions)

    def _on_row_delete_requested(self, row):
        self._delete_positions({row.get_index()})

    def _delete_positions(self, positions):
        try:
            removed = self._store.delete_notes(positions)
        except NoteIndexError as exc:
            # The list was stale; re-render from the store.
            _LOG.warning('Delete rejected: %s', exc)
            self._refresh_notes()
            self._show_toast('Notes changed, nothing was deleted')
            return
        count = len(removed)
        self._show_toast(f'{count} note{"s" if count != 1 else ""} deleted')

    # --- Refresh ---

    def _refresh_notes(self):
        row = self._notes_list.get_first_child()
        while row:
            if isinstance(row, NoteRow) and row.popover is not None:
                row.popover.unparent()
                row.popover = None
            row = row.get_next_sibling()
        self._notes_list.remove_all()

        notes = self._store.get_all_notes()
        if not notes:
            self._notes_stack.set_visible_child_name('empty')
            self._select_btn.set_sensitive(False)
            self._exit_selection_mode()
            return

        self._notes_stack.set_visible_child_name('list')
        self._select_btn.set_sensitive(True)
        for note in notes:
            row = NoteRow(note)
            self._setup_row_menu(row)
            self._notes_list.append(row)
        if self._selection_mode:
            self._update_selection_visuals()

    def _setup_row_menu(self, row):
        menu = Gio.Menu()
        menu.append('Open', 'row.open')
        menu.append('Delete', 'row.delete')

        action_group = Gio.SimpleActionGroup()
        open_action = Gio.SimpleAction.new('open', None)
        open_action.connect('activate', lambda *a: self._app.open_note(row.note_id))
        action_group.add_action(open_action)
        delete_action = Gio.SimpleAction.new('delete', None)
        delete_action.connect('activate', lambda *a: self._on_row_delete_requested(row))
        action_group.add_action(delete_action)
        row.insert_action_group('row', action_group)

        popover = Gtk.PopoverMenu(menu_model=menu)
        popover.set_parent(row)
        popover.set_has_arrow(False)
        row.popover = popover

        right_click = Gtk.GestureClick(button=Gdk.BUTTON_SECONDARY)
        right_click.connect('released', self._on_right_click, popover)
        row.add_controller(right_click)

    def _on_right_click(self, gesture, n_press, x, y, popover):
        if self._selection_mode:
            return
        rect = Gdk.Rectangle()
        rect.x = int(x)
        rect.y = int(y)
        rect.width = 1
        rect.height = 1
        popover.set_pointing_to(rect)
        popover.popup()

    def _show_toast(self, message):
        self._toast_overlay.add_toast(Adw.Toast(title=message, timeout=3))
