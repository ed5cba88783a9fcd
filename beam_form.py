import tkinter as tk
from tkinter import ttk
from typing import Callable

from catalog import MATERIALS, PROFILES
from si_prefix import prefix_labels, prefix_multiplier


class BeamForm(ttk.LabelFrame):
    def __init__(self, master: tk.Widget, on_change: Callable[[tuple], None]):
        super().__init__(master, text="Beam")
        self.on_change = on_change
        self.vars = {
            "length": tk.StringVar(value="10.0"),
            "custom_inertia": tk.StringVar(value=""),
            "custom_section_modulus": tk.StringVar(value=""),
            "points": tk.StringVar(value="200"),
        }
        self.length_prefix = tk.StringVar(value="m")
        self.material_var = tk.StringVar(value=MATERIALS[0].name)
        self.profile_var = tk.StringVar(value=PROFILES[2].name)

        ttk.Label(self, text="Length").grid(row=0, column=0, sticky="w", padx=4, pady=2)
        self._entry("length", row=0)
        ttk.OptionMenu(
            self,
            self.length_prefix,
            self.length_prefix.get(),
            *prefix_labels("m"),
            command=lambda _value: self._emit_change(),
        ).grid(row=0, column=2, sticky="w", padx=4, pady=2)

        ttk.Label(self, text="Material").grid(row=1, column=0, sticky="w", padx=4, pady=2)
        ttk.OptionMenu(
            self,
            self.material_var,
            self.material_var.get(),
            *[m.name for m in MATERIALS],
            command=lambda _value: self._emit_change(),
        ).grid(row=1, column=1, columnspan=2, sticky="ew", padx=4, pady=2)

        ttk.Label(self, text="Profile").grid(row=2, column=0, sticky="w", padx=4, pady=2)
        ttk.OptionMenu(
            self,
            self.profile_var,
            self.profile_var.get(),
            *[p.name for p in PROFILES],
            command=lambda _value: self._emit_change(),
        ).grid(row=2, column=1, columnspan=2, sticky="ew", padx=4, pady=2)

        labels = [
            ("Custom I [cm4]", "custom_inertia"),
            ("Custom W [cm3]", "custom_section_modulus"),
            ("Points", "points"),
        ]
        for row, (text, key) in enumerate(labels, start=3):
            ttk.Label(self, text=text).grid(row=row, column=0, sticky="w", padx=4, pady=2)
            self._entry(key, row=row)
        self.columnconfigure(1, weight=1)

    def _entry(self, key: str, row: int):
        entry = ttk.Entry(self, textvariable=self.vars[key], width=14)
        entry.grid(row=row, column=1, sticky="ew", padx=4, pady=2)
        entry.bind("<FocusOut>", self._emit_change)
        entry.bind("<Return>", self._emit_change)

    def set_values(self, values: tuple):
        length, material, profile, custom_inertia, custom_section_modulus, points = values
        self.vars["length"].set(str(length))
        self.length_prefix.set("m")
        self.material_var.set(material)
        self.profile_var.set(profile)
        self.vars["custom_inertia"].set("" if custom_inertia is None else str(custom_inertia))
        self.vars["custom_section_modulus"].set("" if custom_section_modulus is None else str(custom_section_modulus))
        self.vars["points"].set(str(points))

    def get_values(self):
        try:
            return (
                float(self.vars["length"].get()) * prefix_multiplier(self.length_prefix.get(), "m"),
                self.material_var.get(),
                self.profile_var.get(),
                self._optional_float("custom_inertia"),
                self._optional_float("custom_section_modulus"),
                max(1, int(float(self.vars["points"].get()))),
            )
        except ValueError:
            return None

    def _optional_float(self, key: str):
        text = self.vars[key].get().strip()
        return float(text) if text else None

    def _emit_change(self, _event=None):
        values = self.get_values()
        if values is None:
            return
        self.on_change(values)
