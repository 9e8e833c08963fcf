#!/usr/bin/env python
# -*- coding: utf-8 -*-

import html
import json

from filestamp.app.config import APP_NAME, BRIDGE_OBJECT_NAME
from filestamp.ui.theme.styles import (
    COLOR_ACCENT, COLOR_ACCENT_SUCCESS, COLOR_BACKGROUND, COLOR_BORDER,
    COLOR_ERROR, COLOR_INPUT_BG, COLOR_PANEL, COLOR_TEXT_PRIMARY, COLOR_TEXT_SECONDARY,
)

QWEBCHANNEL_JS_URL = "qrc:///qtwebchannel/qwebchannel.js"


class PageHTMLGenerator:
    """Générateur de la page web (champ chemin + résultat) reliée au bridge."""

    @staticmethod
    def generate(bridge_name: str = BRIDGE_OBJECT_NAME, initial_path: str = "") -> str:
        """Crée le code HTML complet de la page (Dark Mode)."""
        title = html.escape(APP_NAME)
        initial_value = html.escape(initial_path, quote=True)
        bridge_js = json.dumps(bridge_name)

        return f'''<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{title}</title>
    <script src="{QWEBCHANNEL_JS_URL}"></script>
    <style>
        html, body {{ margin: 0; padding: 0; height: 100%; background: {COLOR_BACKGROUND}; color: {COLOR_TEXT_PRIMARY};
                      font-family: 'Segoe UI', 'Roboto', sans-serif; font-size: 14px; }}
        .panel {{ margin: 24px; padding: 20px; background: {COLOR_PANEL}; border: 1px solid {COLOR_BORDER}; border-radius: 6px; }}
        h1 {{ font-size: 18px; margin: 0 0 16px 0; }}
        .row {{ display: flex; gap: 8px; }}
        #path {{ flex: 1; padding: 8px 12px; background: {COLOR_INPUT_BG}; color: {COLOR_TEXT_PRIMARY};
                 border: 1px solid {COLOR_BORDER}; border-radius: 4px; }}
        #query {{ padding: 8px 16px; background: {COLOR_ACCENT}; color: white; border: none; border-radius: 4px; cursor: pointer; }}
        #query:disabled {{ opacity: 0.5; cursor: default; }}
        #result {{ margin-top: 16px; min-height: 40px; white-space: pre-wrap; }}
        .ok {{ color: {COLOR_ACCENT_SUCCESS}; }}
        .error {{ color: {COLOR_ERROR}; }}
        .raw {{ color: {COLOR_TEXT_SECONDARY}; font-size: 12px; font-family: monospace; }}
    </style>
</head>
<body>
    <div class="panel">
        <h1>Date de dernière modification</h1>
        <div class="row">
            <input id="path" type="text" placeholder="Chemin du fichier..." value="{initial_value}">
            <button id="query" disabled>Interroger</button>
        </div>
        <div id="result"></div>
    </div>
    <script>
        var backend = null;
        var pathInput = document.getElementById('path');
        var button = document.getElementById('query');
        var result = document.getElementById('result');

        function render(text) {{
            var payload;
            try {{
                payload = JSON.parse(text);
            }} catch (e) {{
                console.error('Réponse invalide du backend: ' + text);
                return;
            }}
            result.innerHTML = '';
            var line = document.createElement('div');
            if (payload.ok) {{
                line.className = 'ok';
                line.textContent = payload.display || String(payload.value.secs_since_epoch);
                var raw = document.createElement('div');
                raw.className = 'raw';
                raw.textContent = 'secs_since_epoch=' + payload.value.secs_since_epoch +
                                  ' nanos_since_epoch=' + payload.value.nanos_since_epoch;
                result.appendChild(line);
                result.appendChild(raw);
            }} else {{
                line.className = 'error';
                line.textContent = payload.error;
                result.appendChild(line);
            }}
        }}

        function query() {{
            if (!backend) {{ return; }}
            backend.modified_time(pathInput.value, render);
        }}

        new QWebChannel(qt.webChannelTransport, function(channel) {{
            backend = channel.objects[{bridge_js}];
            if (!backend) {{
                console.error('Objet bridge introuvable: ' + {bridge_js});
                return;
            }}
            button.disabled = false;
            console.info('Bridge connecté');
        }});

        button.addEventListener('click', query);
        pathInput.addEventListener('keydown', function(e) {{
            if (e.key === 'Enter') {{ query(); }}
        }});
    </script>
</body>
</html>'''
