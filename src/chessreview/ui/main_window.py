"""ReviewWindow — top-level window assembling the review UI."""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QCloseEvent, QKeyEvent
from PyQt6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from chessreview.coach import (
    CachingCommentaryProvider,
    CliCommentaryProvider,
    CommentaryProvider,
)
from chessreview.review.loader import ReviewFormatError, load_review
from chessreview.review.models import GameReview
from chessreview.review.session import NavKey, ReviewSession
from chessreview.ui.board.board_view import BoardView
from chessreview.ui.commentary_session import CommentarySession
from chessreview.ui.dialogs.commentary_dialog import CommentaryDialog
from chessreview.ui.dialogs.settings_dialog import AppSettings, SettingsDialog
from chessreview.ui.i18n import set_language, t
from chessreview.ui.panels.annotation_badge import AnnotationBadge
from chessreview.ui.panels.eval_bar import EvalBar
from chessreview.ui.panels.key_moments import KeyMomentsBar
from chessreview.ui.panels.move_panel import MovePanel
from chessreview.ui.panels.nav_panel import NavPanel
from chessreview.ui.panels.summary_panel import SummaryPanel
from chessreview.ui.styles.theme import BOARD_THEMES, BoardTheme

_LOGGER = logging.getLogger(__name__)

# Keyed by raw key code; not every code is a Qt.Key member
_NAV_KEYS: dict[int, NavKey] = {
    Qt.Key.Key_Left.value: NavKey.LEFT,
    Qt.Key.Key_Right.value: NavKey.RIGHT,
    Qt.Key.Key_Home.value: NavKey.HOME,
    Qt.Key.Key_End.value: NavKey.END,
}


def _build_provider(settings: AppSettings) -> CommentaryProvider:
    return CachingCommentaryProvider(
        CliCommentaryProvider(settings.coach_command, timeout_s=settings.coach_timeout_s)
    )


class ReviewWindow(QMainWindow):
    """Main application window: board, evaluation, badge and move list."""

    def __init__(
        self,
        *,
        settings: AppSettings | None = None,
        provider: CommentaryProvider | None = None,
    ) -> None:
        super().__init__()
        self.setMinimumSize(900, 640)
        self.resize(1180, 780)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        self._settings = settings if settings is not None else AppSettings()
        self._review_name: str | None = None

        self._commentary = CommentarySession(
            provider=provider if provider is not None else _build_provider(self._settings),
            on_finished=self._on_commentary_finished,
            on_failed=self._on_commentary_failed,
            parent=self,
        )
        self._session = ReviewSession(
            dispatch_commentary=self._commentary.submit,
            on_changed=self._refresh,
        )

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self.apply_settings()
        self._refresh()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        # Eval bar (left)
        self._eval_bar = EvalBar()
        root.addWidget(self._eval_bar)

        # Badge, board, timeline and navigation (center)
        center = QVBoxLayout()
        center.setSpacing(6)

        self._badge = AnnotationBadge()
        center.addWidget(self._badge)

        self._board_view = BoardView()
        center.addWidget(self._board_view, stretch=1)

        self._key_moments = KeyMomentsBar()
        center.addWidget(self._key_moments)

        self._nav_panel = NavPanel()
        center.addWidget(self._nav_panel)
        root.addLayout(center, stretch=3)

        # Right panel
        right = QVBoxLayout()
        right.setSpacing(6)

        self._summary_panel = SummaryPanel()
        right.addWidget(self._summary_panel)

        self._move_panel = MovePanel()
        right.addWidget(self._move_panel, stretch=1)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(300)
        root.addWidget(right_widget)

        self._commentary_dialog = CommentaryDialog(self)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel(t().status_ready)
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        s = t()

        self._menu_file = menu_bar.addMenu(s.menu_file)
        assert self._menu_file is not None

        self._act_open = QAction(s.menu_open_review, self)
        self._act_open.setShortcut("Ctrl+O")
        self._act_open.triggered.connect(self._on_open_review)
        self._menu_file.addAction(self._act_open)

        self._menu_file.addSeparator()

        self._act_flip = QAction(s.menu_flip_board, self)
        self._act_flip.setShortcut("F")
        self._act_flip.triggered.connect(self._on_flip)
        self._menu_file.addAction(self._act_flip)

        self._menu_file.addSeparator()

        self._act_quit = QAction(s.menu_quit, self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_file.addAction(self._act_quit)

        self._menu_settings = menu_bar.addMenu(s.menu_settings)
        assert self._menu_settings is not None

        self._act_settings = QAction(s.menu_settings_action, self)
        self._act_settings.setShortcut("Ctrl+,")
        self._act_settings.triggered.connect(self._on_settings)
        self._menu_settings.addAction(self._act_settings)

    def _connect_signals(self) -> None:
        session = self._session
        self._nav_panel.first_clicked.connect(session.first)
        self._nav_panel.prev_clicked.connect(session.prev)
        self._nav_panel.next_clicked.connect(session.next)
        self._nav_panel.last_clicked.connect(session.last)
        self._nav_panel.flip_clicked.connect(self._on_flip)
        self._move_panel.move_clicked.connect(session.jump_to)
        self._key_moments.moment_clicked.connect(session.jump_to_key_moment)
        self._badge.coach_clicked.connect(self._on_coach_clicked)
        self._commentary_dialog.finished.connect(self._on_commentary_closed)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def session(self) -> ReviewSession:
        return self._session

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def set_review(self, review: GameReview, name: str | None = None) -> None:
        """Show *review* from its starting position."""
        self._review_name = name
        self._move_panel.set_history(review.moves)
        self._summary_panel.set_review(review)
        self._session.load(review)
        self._update_status()

    def open_review_file(self, path: str | Path) -> bool:
        """Load a review JSON file; reports failures in a message box."""
        path = Path(path)
        try:
            review = load_review(path)
        except (ReviewFormatError, OSError) as exc:
            _LOGGER.warning("Could not load review %s: %s", path, exc)
            QMessageBox.warning(
                self, t().open_review_title, t().open_review_failed.format(exc=exc)
            )
            return False
        self.set_review(review, path.name)
        return True

    # ── User actions ─────────────────────────────────────────────────────

    def _on_open_review(self) -> None:
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            t().open_review_title,
            "",
            f"{t().review_filter};;{t().all_files}",
        )
        if file_path:
            self.open_review_file(file_path)

    def _on_flip(self) -> None:
        scene = self._board_view.board_scene
        flipped = not scene.is_flipped()
        scene.set_flipped(flipped)
        self._eval_bar.set_flipped(flipped)

    def _on_coach_clicked(self) -> None:
        if self._session.request_commentary():
            self._update_status()

    def _on_commentary_finished(self, generation: int, text: str) -> None:
        self._session.apply_commentary(generation, text)

    def _on_commentary_failed(self, generation: int, message: str) -> None:
        self._session.apply_commentary_failure(generation, message)

    def _on_commentary_closed(self, _result: int) -> None:
        self._session.close_commentary()

    def keyPressEvent(self, event: QKeyEvent | None) -> None:
        if event is not None:
            nav = _NAV_KEYS.get(event.key())
            if nav is not None and self._session.handle_key(nav):
                event.accept()
                return
        super().keyPressEvent(event)

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._commentary.shutdown()
        super().closeEvent(event)

    # ── Settings ─────────────────────────────────────────────────────────

    def _on_settings(self) -> None:
        dlg = SettingsDialog(self._settings, self)
        if dlg.exec():
            self._settings = dlg.settings()
            self.apply_settings()
            self.apply_coach_settings()

    def apply_settings(self) -> None:
        """Push the current settings onto the widgets."""
        s = self._settings

        # Language must come first so all retranslate calls use the new locale
        set_language(s.language)
        self.retranslate_ui()

        scene = self._board_view.board_scene
        scene.set_theme(BOARD_THEMES.get(s.board_theme, BoardTheme.default()))
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_arrows(s.show_arrows)
        self._eval_bar.setVisible(s.show_eval_bar)
        self._move_panel.set_use_figurine_notation(s.use_figurine_notation)

    def apply_coach_settings(self) -> None:
        """Rebuild the coach provider from the current settings."""
        try:
            provider = _build_provider(self._settings)
        except ValueError as exc:
            _LOGGER.warning("Invalid coach command %r: %s", self._settings.coach_command, exc)
            return
        self._commentary.set_provider(provider)

    def retranslate_ui(self) -> None:
        """Update all translatable strings when the locale changes."""
        s = t()
        self.setWindowTitle(s.window_title)
        self._menu_file.setTitle(s.menu_file)
        self._act_open.setText(s.menu_open_review)
        self._act_flip.setText(s.menu_flip_board)
        self._act_quit.setText(s.menu_quit)
        self._menu_settings.setTitle(s.menu_settings)
        self._act_settings.setText(s.menu_settings_action)
        self._move_panel.retranslate_ui()
        self._nav_panel.retranslate_ui()
        self._key_moments.retranslate_ui()
        self._summary_panel.retranslate_ui()
        self._badge.retranslate_ui()
        self._commentary_dialog.retranslate_ui()
        self._update_status()

    # ── Rendering ────────────────────────────────────────────────────────

    def _refresh(self) -> None:
        """Push the session state into every widget."""
        session = self._session
        scene = self._board_view.board_scene

        scene.set_grid(session.current_grid())
        scene.set_highlights(last_move=session.current_last_move())
        scene.set_arrows(session.current_arrows())

        badge = session.current_badge()
        self._eval_bar.set_score(session.current_eval())
        self._badge.set_content(badge)
        self._badge.set_busy(session.commentary.pending)

        self._move_panel.set_active_index(session.pointer)
        self._nav_panel.set_position(
            at_start=session.at_start or not session.has_moves,
            at_end=session.at_end or not session.has_moves,
            move_text=badge.move_text if badge is not None else None,
        )
        self._key_moments.set_moments(
            session.key_moments(), session.move_count, session.pointer
        )
        self._sync_commentary_dialog()
        self._update_status()

    def _sync_commentary_dialog(self) -> None:
        state = self._session.commentary
        move = self._session.current_move()
        if state.dialog_open and state.text is not None and move is not None:
            self._commentary_dialog.show_commentary(
                move.move_label, state.text, is_error=state.is_error
            )
        elif self._commentary_dialog.isVisible():
            self._commentary_dialog.hide()

    def _update_status(self) -> None:
        s = t()
        if self._session.commentary.pending:
            self._status_label.setText(s.status_coach_thinking)
        elif self._review_name is not None:
            self._status_label.setText(
                s.status_loaded_review.format(
                    name=self._review_name, moves=self._session.move_count
                )
            )
        else:
            self._status_label.setText(s.status_ready)
