"""
Design (ui.py)
- Purpose: Build and manage the Tkinter UI (item list, add/edit dialog, logs panel, row highlights).
- Inputs: CatalogController (intents + read side), CatalogStore change events.
- Outputs: None (renders UI, forwards intents to the controller).
- Side effects: Creates windows; may raise desktop notifications through ChangeNotifier.
- Thread-safety: Main thread only; highlight fades are scheduled with Tk.after().
"""

import tkinter as tk
from tkinter import ttk, messagebox
from datetime import datetime
from typing import Optional

from .controller import CatalogController
from .models import CatalogChange, ChangeKind, Entry
from .notifier import ChangeNotifier, describe_change
from .config import (
    WINDOW_TITLE,
    LIST_TITLE,
    NAME_ERROR_TEXT,
    PRICE_ERROR_TEXT,
    BG_COLOR,
    PANEL_COLOR,
    FG_COLOR,
    ERROR_COLOR,
    ADDED_COLOR,
    UPDATED_COLOR,
    HIGHLIGHT_MS,
    LOG_MAX_LINES,
    ENABLE_NOTIFICATIONS,
)
from .utils import RowHighlights, format_price, price_input_text


class AppUI:
    """
    Design (AppUI)
    - Purpose: Encapsulate all UI creation and behavior. Holds no catalog state of its own:
               every repaint reads controller.entries / controller.session.
    - Public attributes:
        enable_notifications (tk.BooleanVar): toggles desktop notifications on changes
        show_logs (tk.BooleanVar): toggles visibility of the logs panel (change feed)
    - Public methods:
        refresh_ui(): repaint rows and the item count
        on_change(): CatalogStore listener; highlights rows and appends to Logs
    """

    def __init__(self, root: tk.Tk, controller: CatalogController):
        self.root = root
        self.controller = controller
        self.controller.on_any_change = self.on_state_change

        # UI state variables
        self.enable_notifications = tk.BooleanVar(value=ENABLE_NOTIFICATIONS)
        self.show_logs = tk.BooleanVar(value=False)
        self.count_text = tk.StringVar()

        # Rows currently flashing after a change, each with its own fade timer
        self._highlights = RowHighlights(self.root.after, self.root.after_cancel, HIGHLIGHT_MS)

        # Dialog widgets (present only while the edit session is open)
        self._dialog: Optional[tk.Toplevel] = None
        self._name_error: Optional[tk.Label] = None
        self._price_error: Optional[tk.Label] = None

        # Window
        self.root.title(WINDOW_TITLE)
        self.root.rowconfigure(0, weight=1)
        self.root.columnconfigure(0, weight=1)
        self.root.configure(bg=BG_COLOR)

        # Paned window: top = content (list, buttons), bottom = logs (when shown)
        self.paned = ttk.PanedWindow(self.root, orient=tk.VERTICAL)
        self.paned.grid(row=0, column=0, sticky="nsew")

        content_frame = tk.Frame(self.paned, bg=BG_COLOR)
        content_frame.rowconfigure(1, weight=1)
        content_frame.columnconfigure(0, weight=1)
        self.paned.add(content_frame, weight=1)

        self.bottom_frame = tk.Frame(self.paned, bg=BG_COLOR)
        self.logs_box = tk.Text(self.bottom_frame, height=6, bg="#1b1b1b", fg="#dddddd", wrap="none")
        self.logs_box.configure(state="disabled")
        self.paned.add(self.bottom_frame, weight=0)  # start collapsed; expand when Logs checked

        # Style
        style = ttk.Style(self.root)
        style.theme_use("default")
        style.configure(
            "Treeview",
            background=PANEL_COLOR,
            foreground=FG_COLOR,
            fieldbackground=PANEL_COLOR,
            rowheight=24,
            font=("Segoe UI", 10),
        )
        style.configure(
            "Treeview.Heading",
            background=BG_COLOR,
            foreground="#ffffff",
            font=("Segoe UI", 10, "bold"),
        )
        style.map("Treeview", background=[('selected', '#444')], foreground=[])

        tk.Label(content_frame, text=LIST_TITLE, fg=FG_COLOR, bg=BG_COLOR,
                 font=("Segoe UI", 12, "bold")).grid(row=0, column=0, sticky="w", padx=10, pady=(10, 0))

        # Treeview; row iid = entry_id so a renamed row stays the same row
        self.columns = ("name", "price")
        self.tree = ttk.Treeview(content_frame, columns=self.columns, show="headings", selectmode="browse")
        self.tree.grid(row=1, column=0, sticky="nsew", padx=10, pady=(5, 5))
        self.tree.heading("name", text="Item Name")
        self.tree.heading("price", text="Price")
        self.tree.column("price", anchor="e", width=120)

        self.tree.tag_configure("added", foreground=ADDED_COLOR)
        self.tree.tag_configure("updated", foreground=UPDATED_COLOR)

        self.tree.bind("<Double-1>", self.on_double_click)

        tk.Label(content_frame, textvariable=self.count_text, fg=FG_COLOR, bg=BG_COLOR,
                 font=("Segoe UI", 10, "bold")).grid(row=2, column=0, sticky="e", padx=10)

        # Buttons & toggles
        button_frame = tk.Frame(content_frame, bg=BG_COLOR)
        button_frame.grid(row=3, column=0, sticky="ew", padx=10, pady=(0, 10))

        ttk.Button(button_frame, text="New Item", command=self.new_item).pack(side=tk.LEFT, padx=5)
        ttk.Button(button_frame, text="Edit Item", command=self.edit_item).pack(side=tk.LEFT, padx=5)
        ttk.Button(button_frame, text="Delete Item", command=self.delete_item).pack(side=tk.LEFT, padx=5)

        tk.Checkbutton(
            button_frame,
            text="Enable Notifications",
            variable=self.enable_notifications,
            fg="white",
            bg=BG_COLOR,
            selectcolor=PANEL_COLOR,
            activebackground=BG_COLOR,
            activeforeground="white",
        ).pack(side=tk.LEFT, padx=5)

        tk.Checkbutton(
            button_frame,
            text="Show Logs",
            variable=self.show_logs,
            fg="white",
            bg=BG_COLOR,
            selectcolor=PANEL_COLOR,
            command=self.toggle_logs,
        ).pack(side=tk.LEFT, padx=5)

        # Change feed consumers
        self.controller.store.subscribe(self.on_change)
        self.controller.store.subscribe(ChangeNotifier(self.enable_notifications.get))

        # Initial paint
        self.refresh_ui()

    # ---------- state observers ----------

    def on_state_change(self) -> None:
        """Controller hook: repaint the list and keep the dialog in step with the session."""
        self.refresh_ui()
        self._sync_dialog()

    def on_change(self, change: CatalogChange) -> None:
        """
        Purpose: Flash ADDED/UPDATED rows for HIGHLIGHT_MS and log every change.
        Side effects: Schedules the highlight fade with Tk.after().
        """
        entry_id = change.entry.entry_id
        if change.kind is ChangeKind.REMOVED:
            self._highlights.drop(entry_id)
        elif entry_id is not None:
            self._highlights.flash(entry_id, change.kind.value, self.refresh_ui)
        stamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        self._append_log(f"[{stamp}] {describe_change(change)}\n")

    # ---------- UI callbacks & utilities ----------

    def toggle_logs(self) -> None:
        """Show or hide the logs pane; resize the sash accordingly."""
        self.paned.update_idletasks()
        total = self.paned.winfo_height()
        if self.show_logs.get():
            self.paned.pane(self.bottom_frame, weight=1)
            self.logs_box.pack(fill=tk.BOTH, expand=True, padx=10, pady=(0, 6))
            if total > 0:
                self.paned.sashpos(0, int(total * 0.8))
        else:
            self.logs_box.pack_forget()
            self.paned.pane(self.bottom_frame, weight=0)
            if total > 0:
                self.paned.sashpos(0, total)

    def refresh_ui(self) -> None:
        """
        Purpose: Rebuild the Tree rows from the controller snapshot and update the count.
        Side effects: Mutates Treeview items (UI only); keeps the selection when the row survives.
        """
        selected = self.tree.selection()
        self.tree.delete(*self.tree.get_children())
        for entry in self.controller.entries:
            tag = self._highlights.tag(entry.entry_id)
            self.tree.insert(
                "", "end",
                iid=str(entry.entry_id),
                values=(entry.name, format_price(entry.price)),
                tags=(tag,) if tag else (),
            )
        keep = [iid for iid in selected if self.tree.exists(iid)]
        if keep:
            self.tree.selection_set(keep)
        self.count_text.set(f"Total items: {self.controller.count}")

    def _selected_entry(self) -> Optional[Entry]:
        selected = self.tree.selection()
        if not selected:
            return None
        for entry in self.controller.entries:
            if str(entry.entry_id) == selected[0]:
                return entry
        return None

    def on_double_click(self, event) -> None:
        if self.tree.identify_row(event.y):
            self.edit_item()

    def _append_log(self, text: str) -> None:
        """
        Purpose: Append one line to the Logs panel and trim to LOG_MAX_LINES.
        """
        self.logs_box.configure(state="normal")
        self.logs_box.insert("end", text)
        self.logs_box.see("end")
        total_lines = int(self.logs_box.index("end-1c").split(".")[0])
        if total_lines > LOG_MAX_LINES:
            remove = total_lines - LOG_MAX_LINES
            self.logs_box.delete("1.0", f"{remove + 1}.0")
        self.logs_box.configure(state="disabled")

    # ---------- intents ----------

    def new_item(self) -> None:
        self.controller.open_for_create()
        self._open_dialog()

    def edit_item(self) -> None:
        entry = self._selected_entry()
        if entry is None:
            messagebox.showinfo("Edit Item", "Select an item to edit.")
            return
        self.controller.open_for_edit(entry)
        self._open_dialog()

    def delete_item(self) -> None:
        entry = self._selected_entry()
        if entry is None:
            messagebox.showinfo("Delete Item", "Select an item to delete.")
            return
        self.controller.delete_row(entry.name)

    # ---------- add/edit dialog ----------

    def _open_dialog(self) -> None:
        """
        Purpose: Show the modal form for the session's draft. Every keystroke is forwarded as
                 change_field(); Save / Cancel / window close map to the matching intents.
        """
        self._destroy_dialog()
        session = self.controller.session
        draft = session.draft
        if draft is None:
            return

        win = tk.Toplevel(self.root)
        win.title(self.controller.dialog_title)
        win.configure(bg=BG_COLOR)
        win.transient(self.root)
        win.protocol("WM_DELETE_WINDOW", self.controller.cancel)
        self._dialog = win

        v_name = tk.StringVar(value=draft.name)
        v_price = tk.StringVar(value=price_input_text(draft.price))

        tk.Label(win, text="Item Name", fg="white", bg=BG_COLOR).grid(row=0, column=0, sticky="e", padx=5, pady=5)
        e_name = tk.Entry(win, textvariable=v_name, width=32)
        e_name.grid(row=0, column=1, padx=5, pady=5)
        self._name_error = tk.Label(win, text="", fg=ERROR_COLOR, bg=BG_COLOR, font=("Segoe UI", 8))
        self._name_error.grid(row=1, column=1, sticky="w", padx=5)

        tk.Label(win, text="Price", fg="white", bg=BG_COLOR).grid(row=2, column=0, sticky="e", padx=5, pady=5)
        e_price = tk.Entry(win, textvariable=v_price, width=32)
        e_price.grid(row=2, column=1, padx=5, pady=5)
        self._price_error = tk.Label(win, text="", fg=ERROR_COLOR, bg=BG_COLOR, font=("Segoe UI", 8))
        self._price_error.grid(row=3, column=1, sticky="w", padx=5)

        v_name.trace_add("write", lambda *_: self.controller.change_field("name", v_name.get()))
        v_price.trace_add("write", lambda *_: self.controller.change_field("price", v_price.get()))

        buttons = tk.Frame(win, bg=BG_COLOR)
        buttons.grid(row=4, column=0, columnspan=2, pady=10)
        save_text = "Save" if session.is_editing else "Add"
        ttk.Button(buttons, text=save_text, command=self.controller.save).pack(side=tk.LEFT, padx=5)
        ttk.Button(buttons, text="Cancel", command=self.controller.cancel).pack(side=tk.LEFT, padx=5)

        win.bind("<Return>", lambda _e: self.controller.save())
        win.bind("<Escape>", lambda _e: self.controller.cancel())
        e_name.focus_set()
        win.grab_set()

    def _sync_dialog(self) -> None:
        """Close the dialog once the session is closed; otherwise show the current field errors."""
        if self._dialog is None:
            return
        session = self.controller.session
        if not session.is_open:
            self._destroy_dialog()
            return
        errors = session.field_errors
        self._name_error.config(text=NAME_ERROR_TEXT if errors.name_invalid else "")
        self._price_error.config(text=PRICE_ERROR_TEXT if errors.price_invalid else "")

    def _destroy_dialog(self) -> None:
        if self._dialog is None:
            return
        win, self._dialog = self._dialog, None
        self._name_error = self._price_error = None
        win.grab_release()
        win.destroy()
