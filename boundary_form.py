import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional, Tuple

from beam_model import SupportKind

SupportValues = Tuple[SupportKind, float, float]


class BoundaryForm(ttk.LabelFrame):
    def __init__(self, master: tk.Widget, on_change: Callable[[SupportValues], None]):
        super().__init__(master, text="Supports")
        self.on_change = on_change
        self.kind_var = tk.StringVar(value=SupportKind.SIMPLE.value)
        self.support_a_var = tk.StringVar(value="0.0")
        self.support_b_var = tk.StringVar(value="10.0")

        choices = [
            ("Simple", SupportKind.SIMPLE),
            ("Cantilever (left fix)", SupportKind.CANTILEVER_LEFT),
            ("Cantilever (right fix)", SupportKind.CANTILEVER_RIGHT),
        ]
        for column, (text, kind) in enumerate(choices):
            ttk.Radiobutton(self, text=text, variable=self.kind_var, value=kind.value, command=self._emit).grid(
                row=0, column=column, padx=2, pady=2, sticky="w"
            )

        ttk.Label(self, text="Support A [m]").grid(row=1, column=0, padx=4, pady=2, sticky="w")
        self.support_a_entry = ttk.Entry(self, textvariable=self.support_a_var, width=10)
        self.support_a_entry.grid(row=1, column=1, padx=4, pady=2, sticky="w")
        ttk.Label(self, text="Support B [m]").grid(row=2, column=0, padx=4, pady=2, sticky="w")
        self.support_b_entry = ttk.Entry(self, textvariable=self.support_b_var, width=10)
        self.support_b_entry.grid(row=2, column=1, padx=4, pady=2, sticky="w")
        for entry in (self.support_a_entry, self.support_b_entry):
            entry.bind("<FocusOut>", lambda _e: self._emit())
            entry.bind("<Return>", lambda _e: self._emit())

    def set_values(self, kind: SupportKind, support_a: float, support_b: float):
        self.kind_var.set(kind.value)
        self.support_a_var.set(str(support_a))
        self.support_b_var.set(str(support_b))
        self._sync_entries()

    def get_values(self) -> Optional[SupportValues]:
        try:
            return SupportKind(self.kind_var.get()), float(self.support_a_var.get()), float(self.support_b_var.get())
        except ValueError:
            return None

    def _sync_entries(self):
        kind = SupportKind(self.kind_var.get())
        self.support_a_entry.configure(state="disabled" if kind is SupportKind.CANTILEVER_RIGHT else "normal")
        self.support_b_entry.configure(state="normal" if kind is SupportKind.SIMPLE else "disabled")

    def _emit(self):
        self._sync_entries()
        values = self.get_values()
        if values is None:
            return
        self.on_change(values)
