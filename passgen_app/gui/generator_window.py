# passgen_app/gui/generator_window.py
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit,
    QPushButton, QSlider, QCheckBox, QMessageBox
)
from PySide6.QtCore import Qt, QTimer
import config
from .styles.utils import add_shadow
from passgen_app.core import state as st
from passgen_app.core.app_log import log_event, log_warning, log_error
from passgen_app.core.clipboard import ClipboardWriter, NoContentError, CopyFailedError
from passgen_app.core.definitions import (
    CHARACTER_CLASSES, LOG_EVENT_PASSWORD_GENERATED, LOG_EVENT_EMPTY_SELECTION,
    LOG_EVENT_COPY_SUCCESS, LOG_EVENT_COPY_FALLBACK, LOG_EVENT_COPY_FAILED
)
from passgen_app.utils.password_generator import EmptySelectionError

COPY_LABEL = "Copier"
COPIED_LABEL = "✓ Copié"


class PasswordGeneratorWindow(QMainWindow):
    """
    Fenêtre du générateur. Possède un unique GeneratorState ; les slots
    calculent le nouvel état puis appellent refresh_ui().
    """
    def __init__(self, clipboard_writer: ClipboardWriter = None, rng=None,
                 copied_display_ms: int = None, parent=None):
        super().__init__(parent)
        self.state = st.initial_state()
        self.rng = rng
        self.clipboard_writer = clipboard_writer or ClipboardWriter.for_widget(self)

        # Un seul timer, relancé à chaque copie réussie
        self.copied_timer = QTimer(self)
        self.copied_timer.setSingleShot(True)
        self.copied_timer.setInterval(config.COPIED_DISPLAY_MS if copied_display_ms is None else copied_display_ms)
        self.copied_timer.timeout.connect(self.reset_copied)

        self.setWindowTitle("Générateur de mots de passe")
        self.setMinimumSize(480, 640)
        self.setup_ui()
        self.refresh_ui()

    def setup_ui(self):
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        outer = QVBoxLayout(central_widget)
        outer.setContentsMargins(24, 24, 24, 24)
        outer.addStretch()

        card = QWidget()
        card.setObjectName("card")
        card.setMaximumWidth(448)
        add_shadow(card)
        layout = QVBoxLayout(card)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(18)

        # Header
        title = QLabel("Générateur de mots de passe")
        title.setObjectName("title")
        title.setAlignment(Qt.AlignCenter)
        subtitle = QLabel("Créez des mots de passe solides en un instant")
        subtitle.setObjectName("subtitle")
        subtitle.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)
        layout.addWidget(subtitle)

        # Affichage du mot de passe
        display_row = QHBoxLayout()
        self.password_display = QLineEdit()
        self.password_display.setObjectName("password-display")
        self.password_display.setReadOnly(True)
        self.password_display.setAlignment(Qt.AlignCenter)
        self.password_display.setPlaceholderText("Le mot de passe généré apparaîtra ici")
        display_row.addWidget(self.password_display)

        self.copy_btn = QPushButton(COPY_LABEL)
        self.copy_btn.setCursor(Qt.PointingHandCursor)
        self.copy_btn.clicked.connect(self.copy_password)
        display_row.addWidget(self.copy_btn)
        layout.addLayout(display_row)

        # Longueur
        self.length_label = QLabel()
        self.length_slider = QSlider(Qt.Horizontal)
        self.length_slider.setRange(config.MIN_LENGTH, config.MAX_LENGTH)
        self.length_slider.setValue(self.state.length)
        self.length_slider.valueChanged.connect(self.on_length_changed)

        range_row = QHBoxLayout()
        min_label = QLabel(str(config.MIN_LENGTH))
        max_label = QLabel(str(config.MAX_LENGTH))
        for lbl in (min_label, max_label):
            lbl.setObjectName("range-label")
        range_row.addWidget(min_label)
        range_row.addStretch()
        range_row.addWidget(max_label)

        layout.addWidget(self.length_label)
        layout.addWidget(self.length_slider)
        layout.addLayout(range_row)

        # Types de caractères
        layout.addWidget(QLabel("Inclure les caractères :"))
        self.option_checks = {}
        for option, _, label in CHARACTER_CLASSES:
            chk = QCheckBox(label)
            chk.setCursor(Qt.PointingHandCursor)
            chk.setChecked(getattr(self.state, option))
            chk.toggled.connect(lambda checked, name=option: self.on_option_toggled(name, checked))
            self.option_checks[option] = chk
            layout.addWidget(chk)

        # Buttons
        self.generate_btn = QPushButton("Générer le mot de passe")
        self.generate_btn.setProperty("variant", "primary")
        self.generate_btn.setCursor(Qt.PointingHandCursor)
        self.generate_btn.clicked.connect(self.generate_password)
        layout.addWidget(self.generate_btn)

        self.regenerate_btn = QPushButton("Générer un nouveau mot de passe")
        self.regenerate_btn.setProperty("variant", "secondary")
        self.regenerate_btn.setCursor(Qt.PointingHandCursor)
        self.regenerate_btn.clicked.connect(self.generate_password)
        layout.addWidget(self.regenerate_btn)

        outer.addWidget(card, 0, Qt.AlignHCenter)
        outer.addStretch()

    def refresh_ui(self):
        """Synchronise les widgets avec self.state."""
        self.password_display.setText(self.state.password)
        self.length_label.setText(f"Longueur : {self.state.length}")
        self.copy_btn.setVisible(self.state.has_password)
        self.copy_btn.setEnabled(self.state.has_password)
        self.copy_btn.setText(COPIED_LABEL if self.state.copied else COPY_LABEL)
        self.regenerate_btn.setVisible(self.state.has_password)

    def on_length_changed(self, value: int):
        self.state = st.with_length(self.state, value)
        self.refresh_ui()

    def on_option_toggled(self, option: str, checked: bool):
        self.state = st.with_option(self.state, option, checked)

    def generate_password(self):
        try:
            new_state = st.generate(self.state, self.rng)
        except EmptySelectionError as e:
            log_warning(LOG_EVENT_EMPTY_SELECTION)
            QMessageBox.warning(self, "Sélection vide", str(e))
            return

        self.copied_timer.stop()
        self.state = new_state
        enabled = [name for name, _, _ in CHARACTER_CLASSES if getattr(self.state, name)]
        log_event(LOG_EVENT_PASSWORD_GENERATED, f"length={self.state.length} classes={','.join(enabled)}")
        self.refresh_ui()

    def copy_password(self):
        try:
            result = self.clipboard_writer.copy(self.state.password)
        except NoContentError as e:
            QMessageBox.warning(self, "Rien à copier", str(e))
            return
        except CopyFailedError as e:
            log_error(LOG_EVENT_COPY_FAILED, "; ".join(e.errors))
            QMessageBox.critical(self, "Erreur", str(e))
            return

        if result.used_fallback:
            log_warning(LOG_EVENT_COPY_FALLBACK, "; ".join(result.errors))
        log_event(LOG_EVENT_COPY_SUCCESS, f"provider={result.provider}")
        self.state = st.mark_copied(self.state)
        self.copied_timer.start()
        self.refresh_ui()

    def reset_copied(self):
        self.state = st.clear_copied(self.state)
        self.refresh_ui()
