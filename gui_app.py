import logging
import tkinter as tk
from tkinter import ttk, simpledialog

from beam_form import BeamForm
from beam_model import SupportKind
from boundary_form import BoundaryForm
from concentrated_moment import ConcentratedMoment
from diagram_view import DiagramView
from diagrams import compute_diagrams
from distributed_load import DistributedLoad
from gui_state import NEW_DISTRIBUTED_SPAN, NEW_LOAD_MAGNITUDE, BeamUIState
from logging_utils import configure_file_logger
from point_load import PointLoad
from reactions import SUPPORT_TOLERANCE, compute_reactions
from summary import summarize
from summary_panel import SummaryPanel

logger = logging.getLogger("beam_analyser")


def describe_load(load) -> str:
    if isinstance(load, PointLoad):
        return f"Point {load.magnitude:g} kN @ {load.position:g} m"
    if isinstance(load, DistributedLoad):
        return f"UDL {load.intensity:g} kN/m @ {load.position:g}..{load.end:g} m"
    if isinstance(load, ConcentratedMoment):
        return f"Moment {load.magnitude:g} kN·m @ {load.position:g} m"
    return repr(load)


class BeamApp(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("Beam Analyser")
        self.state = BeamUIState()
        self.status_var = tk.StringVar(value="Ready")

        toolbar = ttk.Frame(self, padding=6)
        toolbar.grid(row=0, column=0, columnspan=2, sticky="ew")

        add_btn = ttk.Menubutton(toolbar, text="Add")
        add_btn.pack(side="left", padx=4)
        add_dropdown = tk.Menu(add_btn, tearoff=0)
        add_btn.config(menu=add_dropdown)
        add_dropdown.add_command(label="Point Load", command=lambda: self._add_load_dialog("point"))
        add_dropdown.add_command(label="Distributed Load", command=lambda: self._add_load_dialog("distributed"))
        add_dropdown.add_command(label="Moment", command=lambda: self._add_load_dialog("moment"))
        ttk.Button(toolbar, text="Remove Load", command=self._remove_selected_load).pack(side="left", padx=4)
        ttk.Label(toolbar, textvariable=self.status_var).pack(side="right")

        side = ttk.Frame(self, padding=8)
        side.grid(row=1, column=0, sticky="ns")
        self.beam_form = BeamForm(side, on_change=self._on_beam_change)
        self.beam_form.pack(fill="x", pady=4)
        self.boundary_form = BoundaryForm(side, on_change=self._on_boundary_change)
        self.boundary_form.pack(fill="x", pady=4)

        loads_frame = ttk.LabelFrame(side, text="Loads")
        loads_frame.pack(fill="both", expand=True, pady=4)
        self.load_list = tk.Listbox(loads_frame, height=8)
        self.load_list.pack(fill="both", expand=True, padx=4, pady=4)

        self.summary_panel = SummaryPanel(side)
        self.summary_panel.pack(fill="x", pady=4)

        self.diagram_view = DiagramView(self)
        self.diagram_view.grid(row=1, column=1, sticky="nsew", padx=4, pady=4)
        self.rowconfigure(1, weight=1)
        self.columnconfigure(1, weight=1)

        self.beam_form.set_values(
            (
                self.state.length,
                self.state.material_name,
                self.state.profile_name,
                self.state.custom_inertia,
                self.state.custom_section_modulus,
                self.state.points,
            )
        )
        self.boundary_form.set_values(self.state.support_kind, self.state.support_a, self.state.support_b)
        self._recompute()

    def _on_beam_change(self, values):
        length, material, profile, custom_inertia, custom_section_modulus, points = values
        self.state.material_name = material
        self.state.profile_name = profile
        self.state.custom_inertia = custom_inertia
        self.state.custom_section_modulus = custom_section_modulus
        self.state.points = points
        self.state.set_length(length)
        self.boundary_form.set_values(self.state.support_kind, self.state.support_a, self.state.support_b)
        self._recompute()

    def _on_boundary_change(self, values):
        kind, support_a, support_b = values
        self.state.support_kind = kind
        self.state.support_a = max(0.0, min(self.state.length, support_a))
        self.state.support_b = max(0.0, min(self.state.length, support_b))
        self._recompute()

    def _add_load_dialog(self, kind: str):
        length = self.state.length
        pos = simpledialog.askfloat("Position", f"x along beam [0, {length} m]:", parent=self, initialvalue=length / 2)
        if pos is None:
            return
        prompt = {"point": "Force [kN]:", "distributed": "Intensity [kN/m]:", "moment": "Moment, CCW + [kN·m]:"}[kind]
        value = simpledialog.askfloat("Add load", prompt, parent=self, initialvalue=NEW_LOAD_MAGNITUDE)
        if value is None:
            return
        span = NEW_DISTRIBUTED_SPAN
        if kind == "distributed":
            span = simpledialog.askfloat("Add load", "Loaded length [m]:", parent=self, initialvalue=NEW_DISTRIBUTED_SPAN)
            if span is None or span <= 0:
                return
        self.state.add_load(kind, position=pos, value=value, span_length=span)
        self.status_var.set("Load added")
        self._recompute()

    def _remove_selected_load(self):
        selection = self.load_list.curselection()
        if not selection:
            return
        self.state.remove_load(selection[0])
        self.status_var.set("Load removed")
        self._recompute()

    def _recompute(self):
        self.load_list.delete(0, tk.END)
        for load in self.state.loads:
            self.load_list.insert(tk.END, describe_load(load))

        model = self.state.to_model()
        reactions = compute_reactions(model)
        result = compute_diagrams(model, n=self.state.points, reactions=reactions)
        summary = summarize(
            result,
            reactions,
            section_modulus=self.state.section_modulus,
            yield_strength=self.state.yield_strength,
        )
        logger.info(
            "Solved %s beam L=%s with %d loads: Mmax=%.3f kN*m, max stress=%.1f MPa",
            model.support_kind.value,
            model.length,
            len(model.loads),
            summary.max_moment,
            summary.max_stress,
        )
        self.diagram_view.update_view(result)
        self.summary_panel.update_summary(summary, result.deflection_unit)
        if model.support_kind is SupportKind.SIMPLE and abs(model.support_b - model.support_a) < SUPPORT_TOLERANCE:
            self.status_var.set("Supports coincide: no deflection")


def main():
    configure_file_logger("beam_analyser")
    app = BeamApp()
    app.mainloop()


if __name__ == "__main__":
    main()
