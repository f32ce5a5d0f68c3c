import logging
import sys

from PySide6 import QtCore, QtWidgets

from bezedit.core import CurveEditor, EditorConfig
from bezedit.menu import Bar
from bezedit.widgets import CanvasWidget


class MyWidget(QtWidgets.QWidget):
    def __init__(self, config: EditorConfig | None = None):
        super().__init__()

        self.layout = QtWidgets.QVBoxLayout(self)

        self.canvas = CanvasWidget(CurveEditor(config=config or EditorConfig()), parent=self)
        self.top_bar = Bar(self.canvas)

        self.layout.addWidget(self.top_bar, alignment=QtCore.Qt.AlignmentFlag.AlignTop)
        self.layout.addWidget(self.canvas, stretch=1)

        self.canvas.setFocus()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = QtWidgets.QApplication([])

    widget = MyWidget()
    widget.setWindowTitle("Bezier editor")
    widget.resize(800, 600)
    widget.show()

    sys.exit(app.exec())
