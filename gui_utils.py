import math
import tkinter as tk
from tkinter import messagebox

import structlog
import ttkbootstrap as ttk
from ttkbootstrap.constants import *

from config_utils import AppConfig, ConfigError
from deck_utils import DeckController, DeckError
from display_utils import describe, shortcut_allowed

logger = structlog.get_logger(__name__)

CARD_FONT = "Segoe Script"
MAX_FONT_SIZE = 36
FONT_STEP = 3
ANIMATION_DELAY_MS = 15

LINE_COLOR = "#afcdaf"
CARD_COLOR = "#cdebcd"
PETAL_COLOR = "#ffffff"
STEM_COLOR = "#78a078"
TEXT_COLOR = "#323232"
MARGIN = 50
LINE_SPACING = 30


class FlashcardGUI:
    def __init__(self, controller: DeckController, config: AppConfig | None = None):
        self.controller = controller
        self.config = config or AppConfig()
        self._font_size = MAX_FONT_SIZE
        self._animation_job = None

        # Themed Window
        try:
            self.root = ttk.Window(title=self.config.title, themename=self.config.theme)
        except tk.TclError as e:
            raise ConfigError(f"FLASHCARD_THEME {self.config.theme!r} is not a ttkbootstrap theme") from e
        self.root.geometry("1000x700")
        self.root.report_callback_exception = self._report_callback_exception

        main_frame = ttk.Frame(self.root, padding=30)
        main_frame.pack(fill="both", expand=True)

        # Captions above the card
        caption_frame = ttk.Frame(main_frame)
        caption_frame.pack(fill="x", pady=(0, 10))
        self.side_label = ttk.Label(caption_frame, text="", bootstyle="primary", font=("Helvetica", 12, "bold"))
        self.side_label.pack(side="left")
        self.position_label = ttk.Label(caption_frame, text="", bootstyle="secondary", font=("Helvetica", 12))
        self.position_label.pack(side="right")

        # Card canvas: ruled index card with the card text on top
        self.card_canvas = tk.Canvas(main_frame, highlightthickness=0, bg=CARD_COLOR)
        self.card_canvas.pack(fill="both", expand=True)
        self.card_text = self.card_canvas.create_text(
            0, 0, text="", fill=TEXT_COLOR, justify="center", font=(CARD_FONT, MAX_FONT_SIZE)
        )
        self.card_canvas.bind("<Configure>", self._on_canvas_resize)
        self.card_canvas.bind("<Button-1>", lambda e: self.card_canvas.focus_set())

        # Navigation buttons
        nav_frame = ttk.Frame(main_frame)
        nav_frame.pack(pady=15)
        self.prev_button = ttk.Button(nav_frame, text="Previous Card", bootstyle=SECONDARY, command=self.previous_card)
        self.prev_button.pack(side="left", padx=12)
        self.flip_button = ttk.Button(nav_frame, text="Flip Card", bootstyle=PRIMARY, command=self.flip_card)
        self.flip_button.pack(side="left", padx=12)
        self.next_button = ttk.Button(nav_frame, text="Next Card", bootstyle=SECONDARY, command=self.next_card)
        self.next_button.pack(side="left", padx=12)

        # Question / Answer inputs
        edit_frame = ttk.Frame(main_frame)
        edit_frame.pack(fill="x")
        edit_frame.columnconfigure(1, weight=1)
        ttk.Label(edit_frame, text="Question:").grid(row=0, column=0, sticky="nw", padx=(0, 5), pady=5)
        self.question_input = tk.Text(edit_frame, height=2, wrap="word", font=("Helvetica", 12))
        self.question_input.grid(row=0, column=1, sticky="ew", pady=5)
        ttk.Label(edit_frame, text="Answer:").grid(row=1, column=0, sticky="nw", padx=(0, 5), pady=5)
        self.answer_input = tk.Text(edit_frame, height=2, wrap="word", font=("Helvetica", 12))
        self.answer_input.grid(row=1, column=1, sticky="ew", pady=5)

        # Buttons
        button_frame = ttk.Frame(main_frame)
        button_frame.pack(pady=10)
        self.add_button = ttk.Button(button_frame, text="Add Card", bootstyle=SUCCESS, command=self.add_card)
        self.add_button.pack(side="left", padx=7)
        self.edit_button = ttk.Button(button_frame, text="Edit Card", bootstyle=INFO, command=self.edit_card)
        self.edit_button.pack(side="left", padx=7)
        self.delete_button = ttk.Button(button_frame, text="Delete Card", bootstyle=DANGER, command=self.delete_card)
        self.delete_button.pack(side="left", padx=7)

        # Keyboard shortcuts
        self.root.bind("<Left>", lambda e: self._shortcut(e, self.previous_card))
        self.root.bind("<Right>", lambda e: self._shortcut(e, self.next_card))
        self.root.bind("<space>", lambda e: self._shortcut(e, self.flip_card))

        self._unsubscribe = self.controller.on_change(self.render)
        self.root.protocol("WM_DELETE_WINDOW", self.close)
        self.render()

    # Navigation Methods
    def flip_card(self):
        self.controller.flip()

    def next_card(self):
        self.controller.next()

    def previous_card(self):
        self.controller.previous()

    # Card Methods
    def add_card(self):
        try:
            self.controller.add_card(self._read(self.question_input), self._read(self.answer_input))
        except DeckError as e:
            messagebox.showerror("Error", str(e), parent=self.root)
            return
        messagebox.showinfo("Success", "Card added successfully!", parent=self.root)
        self._write(self.question_input, "")
        self._write(self.answer_input, "")

    def edit_card(self):
        try:
            self.controller.edit_current(self._read(self.question_input), self._read(self.answer_input))
        except DeckError as e:
            messagebox.showerror("Error", str(e), parent=self.root)
            return
        messagebox.showinfo("Success", "Card edited successfully!", parent=self.root)

    def delete_card(self):
        if self.controller.is_empty:
            return
        confirmed = messagebox.askyesno(
            "Confirm Deletion", "Are you sure you want to delete this card?", parent=self.root
        )
        if not confirmed:
            return
        try:
            self.controller.delete_current()
        except DeckError as e:
            messagebox.showerror("Error", str(e), parent=self.root)
            return
        messagebox.showinfo("Success", "Card deleted successfully!", parent=self.root)

    # Update UI
    def render(self):
        display = describe(self.controller)
        self.card_canvas.itemconfigure(self.card_text, text=display.text)
        self.side_label.configure(text=display.side)
        self.position_label.configure(text=display.position)

        nav_state = "normal" if display.can_navigate else "disabled"
        modify_state = "normal" if display.can_modify else "disabled"
        for button in (self.flip_button, self.next_button, self.prev_button):
            button.configure(state=nav_state)
        for button in (self.edit_button, self.delete_button):
            button.configure(state=modify_state)

        if not display.can_modify:
            # Empty deck message is shown without the grow-in
            self._cancel_animation()
            self._set_font_size(MAX_FONT_SIZE)
            return
        self._write(self.question_input, display.question)
        self._write(self.answer_input, display.answer)
        self._start_animation()

    def _cancel_animation(self):
        if self._animation_job is not None:
            self.root.after_cancel(self._animation_job)
            self._animation_job = None

    def _start_animation(self):
        self._cancel_animation()
        if not self.config.animate:
            self._set_font_size(MAX_FONT_SIZE)
            return
        self._font_size = 0
        self._grow_text()

    def _grow_text(self):
        if self._font_size >= MAX_FONT_SIZE:
            self._animation_job = None
            return
        self._set_font_size(min(self._font_size + FONT_STEP, MAX_FONT_SIZE))
        self._animation_job = self.root.after(ANIMATION_DELAY_MS, self._grow_text)

    def _set_font_size(self, size):
        self._font_size = size
        self.card_canvas.itemconfigure(self.card_text, font=(CARD_FONT, size))

    def _on_canvas_resize(self, event):
        canvas = self.card_canvas
        canvas.delete("decor")
        width, height = event.width, event.height
        for y in range(MARGIN, height - MARGIN, LINE_SPACING):
            canvas.create_line(MARGIN, y, width - MARGIN, y, fill=LINE_COLOR, tags="decor")

        self._draw_flower(MARGIN, MARGIN, with_stem=False)
        self._draw_flower(width - 90, MARGIN, with_stem=False)
        self._draw_flower(MARGIN, height - 90, with_stem=True)
        self._draw_flower(width - 90, height - 90, with_stem=True)

        canvas.tag_lower("decor")
        canvas.coords(self.card_text, width / 2, height / 2)
        canvas.itemconfigure(self.card_text, width=max(width - 2 * MARGIN - 60, 100))

    def _draw_flower(self, x, y, with_stem):
        canvas = self.card_canvas
        petal = 25
        for i in range(8):
            angle = math.radians(i * 45)
            px = x + 15 + petal * math.cos(angle)
            py = y + 15 + petal * math.sin(angle)
            canvas.create_oval(
                px - petal / 2, py - petal / 2, px + petal / 2, py + petal / 2,
                fill=PETAL_COLOR, outline="", tags="decor",
            )
        canvas.create_oval(x, y, x + 30, y + 30, fill=LINE_COLOR, outline="", tags="decor")
        if with_stem:
            canvas.create_line(x + 15, y + 30, x + 15, y + 60, fill=STEM_COLOR, width=3, tags="decor")

    # Helpers
    @staticmethod
    def _read(widget):
        return widget.get("1.0", "end-1c")

    @staticmethod
    def _write(widget, text):
        widget.delete("1.0", "end")
        widget.insert("1.0", text)

    def _shortcut(self, event, action):
        focus = self.root.focus_get()
        focus_class = focus.winfo_class() if focus is not None else None
        if shortcut_allowed(focus_class, event.keysym):
            action()

    def _report_callback_exception(self, exc, val, tb):
        logger.error("callback_failed", exc_info=(exc, val, tb))
        messagebox.showerror("Unexpected Error", f"{exc.__name__}: {val}", parent=self.root)

    # Main Loop
    def run(self):
        logger.info("gui_started", cards=len(self.controller), theme=self.config.theme)
        self.root.mainloop()

    def close(self):
        self._unsubscribe()
        self._cancel_animation()
        self.root.destroy()
