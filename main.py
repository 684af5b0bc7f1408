# main.py
import sys
import os
from PySide6.QtWidgets import QApplication
from PySide6.QtGui import QIcon
from passgen_app.gui.generator_window import PasswordGeneratorWindow
from passgen_app.gui.styles import theme_manager
import config # Import config for APP_DATA_DIR

def main():
    # Fix pour l'icône dans la barre des tâches Windows
    if os.name == 'nt':
        import ctypes
        ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID("passgen.app.1")

    os.makedirs(config.APP_DATA_DIR, exist_ok=True)
    app = QApplication(sys.argv)
    theme_manager.apply_theme(config.THEME, app)

    # Configuration de l'icône globale
    icon_path = os.path.join(os.path.dirname(os.path.abspath(config.__file__)), "passgen_app", "gui", "styles", "icons", "logo_icon.svg")
    if os.path.exists(icon_path):
        app.setWindowIcon(QIcon(icon_path))

    window = PasswordGeneratorWindow()
    window.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
