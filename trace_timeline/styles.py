"""Centralized style definitions for the trace timeline host widgets."""


class Colors:
    # Base colors
    BG_PRIMARY = "#1E1E1E"      # Canvas background
    BG_PANELS = "#252526"       # Tooltip and menu background

    # Text colors
    TEXT_PRIMARY = "#E2E8F0"
    TEXT_SECONDARY = "#94A3B8"

    # Accent colors
    ACCENT_BLUE = "#3B82F6"

    # Border colors
    BORDER_SUBTLE = "#454545"


class TimelineStyles:
    """Stylesheets for widgets layered on top of the timeline canvas."""

    TOOLTIP_STYLE = f"""
        QLabel {{
            background-color: {Colors.BG_PANELS};
            color: {Colors.TEXT_PRIMARY};
            border: 1px solid {Colors.BORDER_SUBTLE};
            border-radius: 3px;
            padding: 6px 8px;
            font-size: 9pt;
        }}
    """

    CONTEXT_MENU_STYLE = f"""
        QMenu {{
            background-color: {Colors.BG_PANELS};
            color: {Colors.TEXT_PRIMARY};
            border: 1px solid {Colors.BORDER_SUBTLE};
            padding: 4px 0px;
        }}
        QMenu::item {{
            padding: 4px 20px;
        }}
        QMenu::item:selected {{
            background-color: {Colors.ACCENT_BLUE};
        }}
    """

    STATUS_BAR_STYLE = f"""
        QStatusBar {{
            background-color: {Colors.BG_PANELS};
            color: {Colors.TEXT_SECONDARY};
        }}
    """
