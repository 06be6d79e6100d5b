"""
Application styles and theming for KeyboardHeight

Dark theme with teal/amber accents, sized for touchscreen use.
"""

COLORS = {
    # Backgrounds
    'background': '#17191C',
    'surface': '#1A1D21',
    'surface_light': '#262A32',

    # Borders
    'border': '#2B2F36',
    'border_focus': '#D9A042',      # amber

    # Accents
    'primary': '#20C7C7',           # teal - keyboard open
    'secondary': '#D9A042',

    # Text
    'text': '#E9E9E9',
    'text_dim': '#B9BCC1',
}

STYLESHEET = f"""
QWidget {{
    background-color: {COLORS['background']};
    color: {COLORS['text']};
    font-family: 'Inter', 'Roboto', 'Arial', sans-serif;
    font-size: 14px;
}}

QMainWindow {{
    background-color: {COLORS['background']};
}}

QLineEdit {{
    background-color: {COLORS['surface_light']};
    border: 1.5px solid {COLORS['border']};
    border-radius: 8px;
    padding: 12px 16px;
    font-size: 18px;
}}

QLineEdit:focus {{
    border: 2px solid {COLORS['border_focus']};
}}

QLabel#heightLabel {{
    color: {COLORS['text_dim']};
    font-size: 28px;
    font-weight: 600;
}}

QLabel#heightLabel[keyboardOpen="true"] {{
    color: {COLORS['primary']};
}}

QLabel#hintLabel {{
    color: {COLORS['text_dim']};
    font-size: 13px;
}}
"""
