"""Internationalisation strings for the review UI.

Usage::

    from chessreview.ui.i18n import t, set_language

    set_language("Russian")
    print(t().btn_coach)           # "Тренер"
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_file: str
    menu_open_review: str
    menu_flip_board: str
    menu_quit: str
    menu_settings: str
    menu_settings_action: str

    status_ready: str
    status_loaded_review: str  # "Loaded review: {name} ({moves} moves)"
    status_coach_thinking: str
    open_review_title: str
    open_review_failed: str  # "Failed to load review:\n{exc}"
    review_filter: str
    all_files: str

    # ── Navigation ───────────────────────────────────────────────────────
    nav_start: str
    nav_hint: str
    key_moments_header: str
    moves_header: str

    # ── Badge / coach ────────────────────────────────────────────────────
    btn_coach: str
    btn_coach_busy: str
    coach_title: str

    # ── Summary ──────────────────────────────────────────────────────────
    summary_title: str
    summary_accuracy: str
    summary_opening: str  # "Opening: {name}"
    summary_players: str  # "{white} vs {black}"

    # ── Settings dialog ──────────────────────────────────────────────────
    settings_title: str
    settings_language: str
    settings_board: str
    settings_coach: str
    settings_board_theme: str
    settings_show_coordinates: str
    settings_show_arrows: str
    settings_show_eval_bar: str
    settings_figurines: str
    settings_coach_command: str
    settings_coach_timeout: str
    settings_coach_timeout_suffix: str


_EN = Strings(
    window_title="Chess Review",
    menu_file="&File",
    menu_open_review="&Open Review...",
    menu_flip_board="&Flip Board",
    menu_quit="&Quit",
    menu_settings="&Settings",
    menu_settings_action="&Settings...",
    status_ready="Ready",
    status_loaded_review="Loaded review: {name} ({moves} moves)",
    status_coach_thinking="Asking the coach...",
    open_review_title="Open Review",
    open_review_failed="Failed to load review:\n{exc}",
    review_filter="Review Files (*.json)",
    all_files="All Files (*)",
    nav_start="Start",
    nav_hint="Use ← → arrow keys to navigate",
    key_moments_header="KEY MOMENTS",
    moves_header="Moves",
    btn_coach="💡 Coach",
    btn_coach_busy="...",
    coach_title="AI Coach",
    summary_title="Game Summary",
    summary_accuracy="Accuracy",
    summary_opening="Opening: {name}",
    summary_players="{white} vs {black}",
    settings_title="Settings",
    settings_language="Language:",
    settings_board="Board",
    settings_coach="Coach",
    settings_board_theme="Board theme:",
    settings_show_coordinates="Show coordinates:",
    settings_show_arrows="Show move arrows:",
    settings_show_eval_bar="Show evaluation bar:",
    settings_figurines="Figurine notation:",
    settings_coach_command="Coach command:",
    settings_coach_timeout="Coach timeout:",
    settings_coach_timeout_suffix=" s",
)

_RU = Strings(
    window_title="Разбор партии",
    menu_file="&Файл",
    menu_open_review="&Открыть разбор...",
    menu_flip_board="&Перевернуть доску",
    menu_quit="&Выход",
    menu_settings="&Настройки",
    menu_settings_action="&Настройки...",
    status_ready="Готово",
    status_loaded_review="Загружен разбор: {name} (ходов: {moves})",
    status_coach_thinking="Тренер думает...",
    open_review_title="Открыть разбор",
    open_review_failed="Не удалось загрузить разбор:\n{exc}",
    review_filter="Файлы разбора (*.json)",
    all_files="Все файлы (*)",
    nav_start="Начало",
    nav_hint="Используйте ← → для навигации",
    key_moments_header="КЛЮЧЕВЫЕ МОМЕНТЫ",
    moves_header="Ходы",
    btn_coach="💡 Тренер",
    btn_coach_busy="...",
    coach_title="ИИ-тренер",
    summary_title="Итоги партии",
    summary_accuracy="Точность",
    summary_opening="Дебют: {name}",
    summary_players="{white} — {black}",
    settings_title="Настройки",
    settings_language="Язык:",
    settings_board="Доска",
    settings_coach="Тренер",
    settings_board_theme="Тема доски:",
    settings_show_coordinates="Показывать координаты:",
    settings_show_arrows="Показывать стрелки:",
    settings_show_eval_bar="Показывать шкалу оценки:",
    settings_figurines="Фигурная нотация:",
    settings_coach_command="Команда тренера:",
    settings_coach_timeout="Тайм-аут тренера:",
    settings_coach_timeout_suffix=" с",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
