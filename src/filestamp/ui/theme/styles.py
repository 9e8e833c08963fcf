"""Styles QSS pour FileStamp.
Palette sombre, partagée entre la fenêtre native et la page web.
"""

# Palette de couleurs
COLOR_BACKGROUND = "#1e1e1e"
COLOR_PANEL = "#252525"
COLOR_ACCENT = "#2a4d69"
COLOR_ACCENT_SUCCESS = "#4caf50"
COLOR_ERROR = "#e57373"
COLOR_TEXT_PRIMARY = "#e0e0e0"
COLOR_TEXT_SECONDARY = "#b0b0b0"
COLOR_BORDER = "#3a3a3a"
COLOR_INPUT_BG = "#181818"

WINDOW_STYLE = f"""
QMainWindow {{
    background-color: {COLOR_BACKGROUND};
    color: {COLOR_TEXT_PRIMARY};
}}
QWidget {{
    background-color: {COLOR_BACKGROUND};
    color: {COLOR_TEXT_PRIMARY};
    font-family: 'Segoe UI', 'Roboto', 'Inter', sans-serif;
    font-size: 13px;
}}
"""

STATUS_BAR_STYLE = f"""
QStatusBar {{
    background-color: {COLOR_PANEL};
    color: {COLOR_TEXT_SECONDARY};
    border-top: 1px solid {COLOR_BORDER};
}}
"""

STATUS_OK_STYLE = f"color: {COLOR_ACCENT_SUCCESS};"
STATUS_ERROR_STYLE = f"color: {COLOR_ERROR};"
