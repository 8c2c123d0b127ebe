import customtkinter as ctk

from sprite_editor.controllers.app_controller import AppController
from sprite_editor.controllers.editor_controller import EditorController
from sprite_editor.ui.bottom_bar import BottomBar
from sprite_editor.ui.notifications import WindowNotifier
from sprite_editor.ui.sidebar import Sidebar
from sprite_editor.ui.sprite_canvas import SpriteCanvas


class SpriteEditorApp(ctk.CTk):
    def __init__(self) -> None:
        super().__init__()
        ctk.set_appearance_mode("system")
        ctk.set_default_color_theme("blue")

        self.title("Sprite Editor")
        self.minsize(900, 640)

        # root layout: left canvas, right sidebar
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=0)

        self._canvas = SpriteCanvas(self)
        self._canvas.grid(row=0, column=0, sticky="nsew", padx=(12, 6), pady=(12, 6))

        self._sidebar = Sidebar(self)
        self._sidebar.grid(row=0, column=1, sticky="ns", padx=(6, 12), pady=(12, 6))

        self._bottom = BottomBar(self)
        self._bottom.grid(row=1, column=0, columnspan=2, sticky="ew", padx=12, pady=(0, 12))

        self._editor = EditorController(notifier=WindowNotifier(self._bottom))
        self._controller = AppController(
            editor=self._editor, canvas=self._canvas, sidebar=self._sidebar, bottom=self._bottom, window=self
        )
        self._controller.bind_events()
        # first paint once the window has its real size
        self.after_idle(self._editor.on_show)
