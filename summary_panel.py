import tkinter as tk
from tkinter import ttk

from beam_model import SupportKind
from summary import BeamSummary


class SummaryPanel(ttk.Frame):
    def __init__(self, master: tk.Widget):
        super().__init__(master)
        rows = [
            ("ra", "Reaction A [kN]"),
            ("rb", "Reaction B [kN]"),
            ("ma", "Fixed-end moment [kN·m]"),
            ("max_shear", "Max shear [kN]"),
            ("max_moment", "Max moment [kN·m]"),
            ("max_deflection", "Max deflection"),
            ("max_stress", "Max stress [MPa]"),
            ("safety", "Factor of safety"),
        ]
        self.values = {}
        for row, (key, text) in enumerate(rows):
            ttk.Label(self, text=text).grid(row=row, column=0, sticky="w", padx=4)
            self.values[key] = ttk.Label(self, text="0")
            self.values[key].grid(row=row, column=1, sticky="e", padx=4)

    def update_summary(self, summary: BeamSummary, deflection_unit: str):
        reactions = summary.reactions
        self.values["ra"].config(text=f"{reactions.vertical_a:.2f}")
        self.values["rb"].config(text=f"{reactions.vertical_b:.2f}")
        if reactions.support_kind is SupportKind.SIMPLE:
            self.values["ma"].config(text="—")
        else:
            self.values["ma"].config(text=f"{reactions.moment_a:.2f}")
        self.values["max_shear"].config(text=f"{summary.max_shear:.2f}")
        self.values["max_moment"].config(text=f"{summary.max_moment:.2f}")
        self.values["max_deflection"].config(text=f"{summary.max_deflection:.2f} {deflection_unit}")
        self.values["max_stress"].config(text=f"{summary.max_stress:.1f}")
        status = "OK" if summary.is_safe else "YIELD EXCEEDED"
        self.values["safety"].config(text=f"{summary.safety_factor:.2f} ({status})")
