"""Build de l'exécutable FileStamp (PyInstaller, un seul fichier, sans console)."""

import os
import shutil

APP_NAME = 'FileStamp'
ENTRY_POINT = 'main.py'

# Modules chargés dynamiquement (import différé dans bootstrap, QWebChannel)
HIDDEN_IMPORTS = [
    'filestamp.ui.main_window',
    'PyQt6.QtWebEngineWidgets',
    'PyQt6.QtWebChannel',
    'pytz',
]

BUILD_DIRS = ['build', 'dist']


def pyinstaller_args():
    """Arguments passés à PyInstaller."""
    args = [
        ENTRY_POINT,
        f'--name={APP_NAME}',
        '--onefile',
        '--windowed',  # Pas de fenêtre console
        '--clean',
        '--paths=src',  # Layout src/: le package n'est pas installé
    ]
    args += [f'--hidden-import={module}' for module in HIDDEN_IMPORTS]
    return args


def clean():
    """Supprime les artefacts du build précédent."""
    for folder in BUILD_DIRS:
        if os.path.exists(folder):
            shutil.rmtree(folder)


def build():
    # Dépendance de l'extra "build" uniquement
    import PyInstaller.__main__

    clean()
    print(f"Building {APP_NAME}...")
    PyInstaller.__main__.run(pyinstaller_args())
    print("Build complete. Executable is in 'dist' folder.")


if __name__ == "__main__":
    build()
