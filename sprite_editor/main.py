"""Точка входа в приложение."""
import logging

from sprite_editor.app import SpriteEditorApp


def main() -> None:
    """Создаёт и запускает главное окно редактора."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = SpriteEditorApp()
    app.mainloop()


if __name__ == "__main__":
    main()
