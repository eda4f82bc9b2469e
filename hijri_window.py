"""Hijri date window (tkinter) positioned in the bottom-right corner."""

import dataclasses
from datetime import date
from tkinter import font as tkfont
import tkinter as tk
from typing import Callable

from converter import render
from display import LabelSink
from hijri_logic import HijriDate
from month_names import LANGUAGES
from settings import DisplayConfig, load_settings, save_settings

# Colours
ACCENT = "#0B6E4F"
HEADER_BG = "#F3F3F3"
GRID_BG = "white"
LINE_FG = "#555555"

REFRESH_MS = 60_000


class HijriWindow:
    """Today's Hijri date as day / month / year, plus an optional composed line."""

    def __init__(self, on_change: Callable[[HijriDate], None] | None = None) -> None:
        self.root = tk.Tk()
        self.root.title("Hijri Date")
        self.root.resizable(False, False)
        self.root.configure(bg=GRID_BG)
        self.root.attributes("-topmost", True)

        self._setup_fonts()

        self.config: DisplayConfig = load_settings()
        self.hijri: HijriDate | None = None
        self._on_change = on_change
        self._refresh_after_id: str | None = None

        self._build_shell()
        self.refresh()

        self.root.bind("<Escape>", lambda _e: self.hide())
        self.root.protocol("WM_DELETE_WINDOW", self.hide)
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=9)
        self.font_day = tkfont.Font(family=base, size=36, weight="bold")
        self.font_month = tkfont.Font(family=base, size=14, weight="bold")
        self.font_year = tkfont.Font(family=base, size=12)

    # ------------------------------------------------------------------
    # Build shell (once): day, month and year labels over the composed line
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        outer = tk.Frame(self.root, bg=GRID_BG)
        outer.pack(padx=12, pady=8)

        day_lbl = tk.Label(outer, font=self.font_day, bg=GRID_BG, fg=ACCENT)
        day_lbl.pack()
        month_lbl = tk.Label(outer, font=self.font_month, bg=GRID_BG, fg="#333333")
        month_lbl.pack()
        year_lbl = tk.Label(outer, font=self.font_year, bg=GRID_BG, fg="#333333")
        year_lbl.pack(pady=(0, 4))

        line_lbl = tk.Label(
            self.root, font=self.font_normal, bg=HEADER_BG, fg=LINE_FG, padx=8, pady=3,
        )
        line_lbl.pack(fill="x")

        self._sink = LabelSink({
            "day": day_lbl, "month": month_lbl, "year": year_lbl, "line": line_lbl,
        })

    # ------------------------------------------------------------------
    # Refresh once a minute so the date rolls over at midnight
    # ------------------------------------------------------------------
    def refresh(self) -> None:
        if self._refresh_after_id is not None:
            self.root.after_cancel(self._refresh_after_id)
        hijri = render(self.config, self._sink)
        if hijri != self.hijri:
            self.hijri = hijri
            if self._on_change is not None:
                self._on_change(hijri)
        self._refresh_after_id = self.root.after(REFRESH_MS, self.refresh)

    # ------------------------------------------------------------------
    # Settings dialog
    # ------------------------------------------------------------------
    def open_settings(self) -> None:
        dlg = tk.Toplevel(self.root)
        dlg.title("Settings")
        dlg.resizable(False, False)
        dlg.attributes("-topmost", True)
        dlg.grab_set()

        frame = tk.Frame(dlg, padx=12, pady=8)
        frame.pack()

        cfg = self.config
        tags = [tag for tag, _name in LANGUAGES]
        lang_vars: dict[str, tk.StringVar] = {}
        for row, (field, label) in enumerate((
            ("hijri_lang", "Hijri month names:"),
            ("week_day_lang", "Weekday names:"),
            ("greg_lang", "Gregorian month names:"),
        )):
            tk.Label(frame, text=label, font=self.font_normal).grid(
                row=row, column=0, sticky="w", pady=4,
            )
            var = tk.StringVar(value=getattr(cfg, field))
            tk.OptionMenu(frame, var, *tags).grid(row=row, column=1, sticky="we", padx=(8, 0))
            lang_vars[field] = var

        tk.Label(frame, text="Correction (days):", font=self.font_normal).grid(
            row=3, column=0, sticky="w", pady=4,
        )
        spin_corr = tk.Spinbox(frame, from_=-3, to=3, width=4, font=self.font_normal)
        spin_corr.delete(0, "end")
        spin_corr.insert(0, str(cfg.correction))
        spin_corr.grid(row=3, column=1, sticky="w", padx=(8, 0), pady=4)

        tk.Label(frame, text="Separator:", font=self.font_normal).grid(
            row=4, column=0, sticky="w", pady=4,
        )
        sep_var = tk.StringVar(value=cfg.separator)
        tk.Entry(frame, textvariable=sep_var, width=6, font=self.font_normal).grid(
            row=4, column=1, sticky="w", padx=(8, 0), pady=4,
        )

        week_day_var = tk.BooleanVar(value=cfg.show_week_day)
        tk.Checkbutton(
            frame, text="Show weekday", variable=week_day_var, font=self.font_normal,
        ).grid(row=5, column=0, columnspan=2, sticky="w", pady=2)
        greg_var = tk.BooleanVar(value=cfg.show_greg_date)
        tk.Checkbutton(
            frame, text="Show Gregorian date", variable=greg_var, font=self.font_normal,
        ).grid(row=6, column=0, columnspan=2, sticky="w", pady=2)

        # --- Buttons ---
        btn_frame = tk.Frame(frame)
        btn_frame.grid(row=7, column=0, columnspan=2, pady=(8, 0))

        def on_ok() -> None:
            try:
                correction = max(-3, min(3, int(spin_corr.get())))
            except ValueError:
                return
            self.config = dataclasses.replace(
                self.config,
                correction=correction,
                separator=sep_var.get(),
                show_week_day=week_day_var.get(),
                show_greg_date=greg_var.get(),
                **{field: var.get() for field, var in lang_vars.items()},
            )
            save_settings(self.config)
            dlg.destroy()
            self.refresh()

        tk.Button(btn_frame, text="OK", width=8, command=on_ok).pack(side="left", padx=4)
        tk.Button(btn_frame, text="Cancel", width=8, command=dlg.destroy).pack(
            side="left", padx=4,
        )

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        self.refresh()
        self.root.title(f"Hijri Date  {date.today().strftime('%d.%m.%Y')}")
        self.root.deiconify()
        self._position_window()
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Position bottom-right, clear of a typical taskbar
    # ------------------------------------------------------------------
    def _position_window(self) -> None:
        self.root.update_idletasks()
        win_w = self.root.winfo_reqwidth()
        win_h = self.root.winfo_reqheight()
        x = self.root.winfo_screenwidth() - win_w - 12
        y = self.root.winfo_screenheight() - win_h - 60
        self.root.geometry(f"{win_w}x{win_h}+{x}+{y}")
