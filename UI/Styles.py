class AppColors:
    # Base colors
    BG_DARK = "#1A1A1A"
    BG_MEDIUM = "#2d2d2d"
    BG_LIGHT = "#3a3a3a"

    # Text colors
    TEXT_LIGHT = "#ffffff"
    TEXT_SECONDARY = "#888888"
    TEXT_SUBTLE = "#8e9ba9"
    TEXT_LINK = "#4FC3F7"
    TEXT_DANGER = "#FF5252"
    TEXT_TABLE = "#e2e8f0"
    TEXT_SUCCESS = "#4CAF50"

    # Accent colors
    ACCENT_BLUE = "#0095ff"
    ACCENT_RED = "#E81123"

    # Border colors
    BORDER_COLOR = "#2d2d2d"
    BORDER_LIGHT = "#454545"

    # UI element colors
    CARD_BG = "#1e1e1e"
    HEADER_BG = "#252525"

    # Hover states
    HOVER_BG = "rgba(255, 255, 255, 0.1)"
    HOVER_BG_DARKER = "rgba(255, 255, 255, 0.05)"

    # Status colors
    STATUS_ACTIVE = "#4CAF50"    # Green
    STATUS_STOPPED = "#969696"

    SEARCH_BAR_HEIGHT = 30
    SEARCH_BAR_MIN_WIDTH = 200


class AppConstants:
    SIZES = {
        "ROW_HEIGHT": 40,
        "ICON_SIZE": 16,
    }

    SPACING = {
        "TINY": 4,
        "SMALL": 8,
        "MEDIUM": 16,
    }


class AppStyles:
    # Main application style
    MAIN_STYLE = f"""
        QMainWindow, QWidget {{
            background-color: {AppColors.BG_DARK};
            color: {AppColors.TEXT_LIGHT};
            font-family: 'Segoe UI', sans-serif;
        }}
    """

    TITLE_STYLE = f"""
        QLabel {{
            font-size: 20px;
            font-weight: bold;
            color: {AppColors.TEXT_LIGHT};
        }}
    """

    ITEMS_COUNT_STYLE = f"""
        QLabel {{
            color: {AppColors.TEXT_SUBTLE};
            font-size: 12px;
            margin-left: 8px;
            font-family: 'Segoe UI';
        }}
    """

    SEARCH_STYLE = f"""
        QLineEdit {{
            background-color: {AppColors.BG_MEDIUM};
            color: {AppColors.TEXT_LIGHT};
            border: 1px solid #3d3d3d;
            border-radius: 4px;
            padding: 5px 10px;
            font-size: 13px;
        }}
        QLineEdit:hover {{
            border: 1px solid #555555;
        }}
        QLineEdit:focus {{
            border: 1px solid #0078d7;
        }}
    """

    TABLE_STYLE = f"""
        QTableWidget {{
            background-color: {AppColors.CARD_BG};
            border: none;
            gridline-color: transparent;
            outline: none;
            color: {AppColors.TEXT_TABLE};
        }}
        QTableWidget::item {{
            padding: 10px 8px;
            border: none;
            outline: none;
            color: {AppColors.TEXT_TABLE};
        }}
        QTableWidget::item:hover {{
            background-color: rgba(53, 132, 228, 0.15);
        }}
        QHeaderView::section {{
            background-color: transparent;
            color: {AppColors.TEXT_SECONDARY};
            padding: 10px 8px;
            border: none;
            border-bottom: 1px solid {AppColors.BORDER_COLOR};
            font-size: 12px;
        }}
    """

    BUTTON_PRIMARY_STYLE = f"""
        QPushButton {{
            background-color: {AppColors.ACCENT_BLUE};
            color: {AppColors.TEXT_LIGHT};
            border: none;
            padding: 8px 15px;
            border-radius: 4px;
        }}
        QPushButton:hover {{
            background-color: #3A8EDF;
        }}
        QPushButton:disabled {{
            background-color: {AppColors.BG_LIGHT};
            color: {AppColors.TEXT_SECONDARY};
        }}
    """

    BUTTON_SECONDARY_STYLE = f"""
        QPushButton {{
            background-color: {AppColors.HEADER_BG};
            color: {AppColors.TEXT_SUBTLE};
            border: 1px solid {AppColors.ACCENT_BLUE};
            padding: 8px 15px;
            border-radius: 4px;
        }}
        QPushButton:hover {{
            background-color: {AppColors.BG_MEDIUM};
        }}
        QPushButton:disabled {{
            color: {AppColors.TEXT_SECONDARY};
            border: 1px solid {AppColors.BORDER_LIGHT};
        }}
    """

    BUTTON_DANGER_STYLE = f"""
        QPushButton {{
            background-color: {AppColors.ACCENT_RED};
            color: {AppColors.TEXT_LIGHT};
            border: none;
            padding: 8px 15px;
            border-radius: 4px;
        }}
        QPushButton:hover {{
            background-color: #c50f1f;
        }}
        QPushButton:disabled {{
            background-color: {AppColors.BG_LIGHT};
            color: {AppColors.TEXT_SECONDARY};
        }}
    """

    ACTION_BUTTON_STYLE = f"""
        QToolButton {{
            background: transparent;
            padding: 2px;
            margin: 0;
            border: none;
        }}
        QToolButton:hover {{
            background-color: {AppColors.HOVER_BG};
            border-radius: 3px;
        }}
        QToolButton:pressed {{
            background-color: {AppColors.HOVER_BG_DARKER};
        }}
    """

    LINK_BUTTON_STYLE = f"""
        QPushButton {{
            background: transparent;
            border: none;
            color: {AppColors.TEXT_TABLE};
            text-align: left;
            padding: 0px;
        }}
        QPushButton:hover {{
            color: {AppColors.TEXT_LINK};
        }}
    """

    COPIED_LABEL_STYLE = f"color: {AppColors.TEXT_SUCCESS}; font-size: 12px; background: transparent;"

    EMPTY_LABEL_STYLE = f"""
        QLabel {{
            color: {AppColors.TEXT_SUBTLE};
            font-size: 16px;
            background-color: transparent;
        }}
    """

    EMPTY_SUBTEXT_STYLE = f"""
        QLabel {{
            color: {AppColors.TEXT_SECONDARY};
            font-size: 13px;
            background-color: transparent;
        }}
    """

    ERROR_TEXT_STYLE = f"color: {AppColors.TEXT_DANGER}; font-size: 13px; background: transparent;"

    PAGINATION_LABEL_STYLE = f"color: {AppColors.TEXT_SUBTLE}; font-size: 12px;"

    DIALOG_STYLE = f"""
        QDialog {{
            background-color: {AppColors.CARD_BG};
            color: {AppColors.TEXT_LIGHT};
        }}
        QLabel {{
            color: {AppColors.TEXT_LIGHT};
            background: transparent;
        }}
        QLineEdit {{
            background-color: {AppColors.BG_MEDIUM};
            border: 1px solid {AppColors.BORDER_LIGHT};
            border-radius: 4px;
            padding: 6px;
            color: {AppColors.TEXT_LIGHT};
        }}
    """

    DIALOG_DESCRIPTION_STYLE = f"color: {AppColors.TEXT_SUBTLE}; font-size: 13px;"
