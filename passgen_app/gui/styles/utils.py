from PySide6.QtGui import QColor
from PySide6.QtWidgets import QGraphicsDropShadowEffect

def add_shadow(widget, blur: int = 32, offset_y: int = 8, alpha: int = 26):
    effect = QGraphicsDropShadowEffect(widget)
    effect.setBlurRadius(blur)
    effect.setOffset(0, offset_y)
    effect.setColor(QColor(0, 0, 0, alpha))
    widget.setGraphicsEffect(effect)
    return effect
