"""Entry point: glues pystray (daemon thread) with tkinter (main thread)."""

import argparse
import ctypes
import logging
import threading
from datetime import date

from converter import Clock, convert_today_to_hijri, display_line
from hijri_logic import HijriDate
from logging_setup import setup_logging
from settings import load_settings

logger = logging.getLogger(__name__)


def print_today(clock: Clock = date.today) -> None:
    config = load_settings()
    today = clock()
    hijri = convert_today_to_hijri(config, lambda: today)
    print(display_line(today, hijri, config))


def run_tray() -> None:
    from hijri_window import HijriWindow
    from icon_gen import create_icon_image
    from tray_icon import create_tray, update_tray

    # DPI awareness so positions / fonts are crisp on Hi-DPI monitors
    try:
        ctypes.windll.shcore.SetProcessDpiAwareness(1)
    except (AttributeError, OSError):
        pass

    tray = None

    def on_change(hijri: HijriDate) -> None:
        if tray is not None:
            update_tray(tray, create_icon_image(hijri.day), str(hijri))

    win = HijriWindow(on_change=on_change)

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        win.root.after(0, win.toggle)

    def on_exit() -> None:
        def _quit() -> None:
            tray.stop()
            win.root.destroy()
        win.root.after(0, _quit)

    def on_settings() -> None:
        win.root.after(0, win.open_settings)

    tray = create_tray(create_icon_image(win.hijri.day), str(win.hijri),
                       on_show, on_exit, on_settings=on_settings)

    # Run pystray in a daemon thread so it doesn't block tkinter
    tray_thread = threading.Thread(target=tray.run, daemon=True)
    tray_thread.start()
    logger.info("Tray started: %s", win.hijri)

    # tkinter main loop on the main thread
    win.root.mainloop()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Today's Hijri date in the system tray.")
    parser.add_argument("--print", dest="print_only", action="store_true",
                        help="print today's Hijri date and exit")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None)
    args = parser.parse_args(argv)

    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    if args.print_only:
        print_today()
    else:
        run_tray()


if __name__ == "__main__":
    main()
