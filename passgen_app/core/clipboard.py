# passgen_app/core/clipboard.py
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import List, Optional
from PySide6.QtCore import Qt
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QLineEdit, QWidget

STAGING_FIELD_NAME = "clipboard-staging-field"


class ClipboardError(RuntimeError):
    pass

class NoContentError(ClipboardError):
    """Rien à copier."""

class CopyFailedError(ClipboardError):
    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or []


@dataclass
class CopyResult:
    provider: str
    # Erreurs des fournisseurs essayés avant celui qui a réussi
    errors: List[str] = field(default_factory=list)

    @property
    def used_fallback(self) -> bool:
        return bool(self.errors)


class ClipboardProvider(ABC):
    """Contract for clipboard write backends."""
    name = "abstract"

    @abstractmethod
    def is_available(self) -> bool:
        ...

    @abstractmethod
    def write_text(self, text: str) -> None:
        """Place `text` on the clipboard.

        Raises:
            ClipboardError: if the write could not be confirmed.
        """
        ...


def _system_clipboard():
    if QGuiApplication.instance() is None:
        raise ClipboardError("Aucune application Qt active.")
    clipboard = QGuiApplication.clipboard()
    if clipboard is None:
        raise ClipboardError("Presse-papiers système indisponible.")
    return clipboard

def _check_written(text: str):
    # Relecture : seule preuve que l'écriture a réellement abouti
    if _system_clipboard().text() != text:
        raise ClipboardError("Le contenu du presse-papiers ne correspond pas.")


class NativeClipboardProvider(ClipboardProvider):
    name = "native"

    def is_available(self) -> bool:
        return QGuiApplication.instance() is not None and QGuiApplication.clipboard() is not None

    def write_text(self, text: str) -> None:
        _system_clipboard().setText(text)
        _check_written(text)


class StagingFieldClipboardProvider(ClipboardProvider):
    """
    Fallback: place the text in a hidden, focusable QLineEdit attached to `host`,
    select it and let the widget perform its own copy. The staging field is
    removed from the host before returning, on success as well as on failure.
    """
    name = "staging-field"

    def __init__(self, host: QWidget):
        self.host = host

    def is_available(self) -> bool:
        return self.host is not None and QGuiApplication.instance() is not None

    @contextmanager
    def _staging_field(self, text: str):
        staging = QLineEdit(self.host)
        staging.setObjectName(STAGING_FIELD_NAME)
        staging.setFocusPolicy(Qt.StrongFocus)
        staging.setGeometry(-1000, -1000, 1, 1)
        staging.setText(text)
        try:
            yield staging
        finally:
            staging.hide()
            staging.setParent(None)
            staging.deleteLater()

    def write_text(self, text: str) -> None:
        if self.host is None:
            raise ClipboardError("Aucun widget hôte pour le champ temporaire.")
        with self._staging_field(text) as staging:
            staging.show()
            staging.setFocus()
            staging.selectAll()
            staging.copy()
            _check_written(text)


def detect_providers(host: QWidget = None) -> List[ClipboardProvider]:
    """Retourne les fournisseurs disponibles, du plus direct au plus ancien."""
    candidates = [NativeClipboardProvider(), StagingFieldClipboardProvider(host)]
    return [p for p in candidates if p.is_available()]


class ClipboardWriter:
    def __init__(self, providers: List[ClipboardProvider]):
        self.providers = list(providers)

    @classmethod
    def for_widget(cls, host: QWidget) -> "ClipboardWriter":
        return cls(detect_providers(host))

    def copy(self, text: str) -> CopyResult:
        if not text:
            raise NoContentError("Veuillez d'abord générer un mot de passe !")

        errors = []
        for provider in self.providers:
            try:
                provider.write_text(text)
                return CopyResult(provider=provider.name, errors=errors)
            except ClipboardError as e:
                errors.append(f"{provider.name}: {e}")
        if not self.providers:
            errors.append("aucun fournisseur de presse-papiers disponible")
        raise CopyFailedError("Impossible de copier le mot de passe dans le presse-papiers.", errors)
