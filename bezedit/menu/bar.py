from PySide6 import QtCore, QtWidgets

from bezedit.widgets import CanvasWidget
from bezedit.menu.tools import ModeSelectorWidget


class Bar(QtWidgets.QToolBar):
    def __init__(self, canvas: CanvasWidget):
        super().__init__()

        self.canvas = canvas
        self.reset_button = QtWidgets.QPushButton("reset")
        self.setObjectName("Bar")
        self.setMovable(False)
        self.setFloatable(False)
        self.setIconSize(QtCore.QSize(18, 18))

        self.mode_selector = ModeSelectorWidget(canvas.editor.curve.mode)
        self.bounding_check = QtWidgets.QCheckBox("Bounding boxes (B)")
        self.grid_check = QtWidgets.QCheckBox("Grid (G)")
        self.status = QtWidgets.QLabel()

        # keep keyboard focus on the canvas for the B/G/M keys
        for w in (self.reset_button, self.mode_selector.select_box, self.bounding_check, self.grid_check):
            w.setFocusPolicy(QtCore.Qt.FocusPolicy.NoFocus)

        self.addWidget(self.reset_button)
        self.addWidget(self.mode_selector)
        self.addWidget(self.bounding_check)
        self.addWidget(self.grid_check)
        self.addSeparator()
        self.addWidget(self.status)

        self.reset_button.clicked.connect(self._reset_curve)
        self.mode_selector.mode_changed.connect(self.canvas.set_mode)
        self.bounding_check.toggled.connect(self.canvas.set_draw_bounding)
        self.grid_check.toggled.connect(self.canvas.set_draw_grid)

        self.canvas.modeChanged.connect(self.mode_selector.set_mode)
        self.canvas.togglesChanged.connect(self.refresh)
        self.canvas.curveChanged.connect(self.refresh)
        self.refresh()

    @QtCore.Slot()
    def _reset_curve(self):
        self.canvas.reset()

    @QtCore.Slot()
    def refresh(self):
        editor = self.canvas.editor
        for check, on in ((self.bounding_check, editor.draw_bounding), (self.grid_check, editor.draw_grid)):
            if check.isChecked() != on:
                check.blockSignals(True)
                check.setChecked(on)
                check.blockSignals(False)
        curve = editor.curve
        self.status.setText(f"{len(curve)} points, {curve.segment_count} segments")
