from enum import Enum

from PySide6 import QtWidgets
from PySide6.QtCore import Qt, Signal

from bezedit.core import BERNSTEIN, CASTELJAU


class EvalMode(Enum):
    CASTELJAU = CASTELJAU
    BERNSTEIN = BERNSTEIN


_LABELS = {
    EvalMode.CASTELJAU: "De Casteljau",
    EvalMode.BERNSTEIN: "Bernstein",
}


class ModeSelectorWidget(QtWidgets.QWidget):

    mode_changed = Signal(str)

    def __init__(self, mode: str = BERNSTEIN):
        super().__init__()

        self.select_box = QtWidgets.QComboBox()
        for m in EvalMode:
            self.select_box.addItem(_LABELS[m], m.value)
        self.text = QtWidgets.QLabel("Mode: ")
        self.layout = QtWidgets.QHBoxLayout(self)

        self.layout.addWidget(self.text, alignment=Qt.AlignmentFlag.AlignLeft)
        self.layout.addWidget(self.select_box, alignment=Qt.AlignmentFlag.AlignLeft)

        self.set_mode(mode)
        self.select_box.currentIndexChanged.connect(self._on_mode_changed)

    @property
    def mode(self) -> str:
        return self.select_box.currentData()

    def set_mode(self, mode: str) -> None:
        idx = self.select_box.findData(EvalMode(mode).value)
        if idx != self.select_box.currentIndex():
            self.select_box.blockSignals(True)
            self.select_box.setCurrentIndex(idx)
            self.select_box.blockSignals(False)

    def _on_mode_changed(self, index: int):
        self.mode_changed.emit(self.select_box.itemData(index))
