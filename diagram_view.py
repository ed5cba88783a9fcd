import tkinter as tk
from tkinter import ttk
from typing import Optional, Sequence

from diagrams import BeamResult


class DiagramView(ttk.Frame):
    def __init__(self, master: tk.Widget, width: int = 800, height: int = 480):
        super().__init__(master)
        self._last: Optional[BeamResult] = None
        self.canvases = {}
        self.titles = {}
        for key, title in (("shear", "Shear force [kN]"), ("moment", "Bending moment [kN·m]"), ("deflection", "Deflection")):
            self.titles[key] = ttk.Label(self, text=title)
            self.titles[key].pack(anchor="w")
            canvas = tk.Canvas(
                self, width=width, height=height // 3, bg="white", highlightthickness=1, highlightbackground="#ccc"
            )
            canvas.pack(fill="both", expand=True, pady=(0, 4))
            canvas.bind("<Configure>", lambda _e: self._redraw())
            self.canvases[key] = canvas

    def _draw_curve(self, canvas: tk.Canvas, x: Sequence[float], y: Sequence[float], color: str):
        canvas.delete("all")
        if len(x) == 0:
            return
        w = canvas.winfo_width() or int(canvas["width"])
        h = canvas.winfo_height() or int(canvas["height"])
        if w <= 0 or h <= 0:
            return
        margin = 30
        x0, x1 = margin, w - margin
        y0, y1 = margin / 2, h - margin / 2
        canvas.create_line(x0, (y0 + y1) / 2, x1, (y0 + y1) / 2, fill="#888", width=2)
        max_abs = max(max(y), -min(y), 1e-9)

        def to_canvas(ix):
            cx = x0 + (x[ix] - x[0]) / max(x[-1] - x[0], 1e-9) * (x1 - x0)
            cy = (y0 + y1) / 2 - (y[ix] / max_abs) * (y1 - y0) / 2
            return cx, cy

        pts = []
        for i in range(len(x)):
            pts.extend(to_canvas(i))
        if len(pts) >= 4:
            canvas.create_line(*pts, fill=color, width=3)
        canvas.create_text(x1, y0, text=f"{max_abs:.3g}", anchor="ne", fill="#444")

    def update_view(self, result: Optional[BeamResult]):
        self._last = result
        if result is not None:
            self.titles["deflection"].config(text=f"Deflection [{result.deflection_unit}]")
        self._redraw()

    def _redraw(self):
        if self._last is None:
            for canvas in self.canvases.values():
                canvas.delete("all")
            return
        x = list(self._last.x)
        self._draw_curve(self.canvases["shear"], x, list(self._last.shear), "#2c3e50")
        self._draw_curve(self.canvases["moment"], x, list(self._last.moment), "#8e44ad")
        self._draw_curve(self.canvases["deflection"], x, list(self._last.deflection), "#16a085")
