"""System-tray icon setup via pystray."""

from typing import Callable

import pystray
from PIL import Image
from pystray import MenuItem, Menu


def create_tray(
    icon_image: Image.Image,
    title: str,
    on_show: Callable[[], None],
    on_exit: Callable[[], None],
    on_settings: Callable[[], None] | None = None,
) -> pystray.Icon:
    """Build and return a pystray Icon (not yet started)."""
    items: list[MenuItem | Menu] = [
        MenuItem("Show Hijri Date", lambda _icon, _item: on_show(), default=True),
    ]
    if on_settings is not None:
        items.append(MenuItem("Settings", lambda _icon, _item: on_settings()))
    items.append(Menu.SEPARATOR)
    items.append(MenuItem("Exit", lambda _icon, _item: on_exit()))
    return pystray.Icon("mini-hijri-calendar", icon_image, title, Menu(*items))


def update_tray(icon: pystray.Icon, icon_image: Image.Image, title: str) -> None:
    """Swap the image and tooltip after the date rolls over."""
    icon.icon = icon_image
    icon.title = title
