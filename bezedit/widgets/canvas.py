from typing import Optional

from PySide6 import QtCore, QtGui, QtWidgets

from bezedit.core import CurveEditor, DrawSink, InputFrame
from bezedit.core.color import BLACK, GREEN, YELLOW
from bezedit.widgets.utils import QPainterSink, qpoint_to_point


class CanvasWidget(QtWidgets.QWidget):
    """
    View/controller for a CurveEditor.
    Qt events are folded into one InputFrame per timer tick; painting replays
    the editor's draw primitives through a QPainter.
    """

    curveChanged = QtCore.Signal()      # emitted after a tick that left the curve dirty
    modeChanged = QtCore.Signal(str)    # emitted when the evaluation mode changes
    togglesChanged = QtCore.Signal()    # emitted when bounding box or grid visibility changes

    def __init__(self, editor: Optional[CurveEditor] = None, parent=None):
        super().__init__(parent)

        # model
        self._editor = editor or CurveEditor()

        # pending input, consumed by the next tick
        self._pointer = (0.0, 0.0)
        self._primary_down = False
        self._primary_pressed = False
        self._secondary_pressed = False
        self._keys: set[int] = set()

        self.setMouseTracking(True)
        self.setFocusPolicy(QtCore.Qt.FocusPolicy.StrongFocus)

        self._timer = QtCore.QTimer(self)
        self._timer.setInterval(self._editor.config.tick_interval_ms)
        self._timer.timeout.connect(self._on_tick)
        self._timer.start()

    # --- public API -------------------------
    @property
    def editor(self) -> CurveEditor:
        return self._editor

    def set_mode(self, mode: str) -> None:
        if mode != self._editor.curve.mode:
            self._editor.curve.set_mode(mode)
            self.modeChanged.emit(mode)
            self.update()

    def set_draw_bounding(self, on: bool) -> None:
        if self._editor.draw_bounding != on:
            self._editor.draw_bounding = on
            self.togglesChanged.emit()
            self.update()

    def set_draw_grid(self, on: bool) -> None:
        if self._editor.draw_grid != on:
            self._editor.draw_grid = on
            self.togglesChanged.emit()
            self.update()

    def reset(self) -> None:
        self._editor.reset()
        self.curveChanged.emit()
        self.update()

    # ---------- size hints ----------
    def sizeHint(self):
        return QtCore.QSize(800, 600)

    def minimumSizeHint(self):
        return QtCore.QSize(200, 200)

    # ---------- Qt events ----------
    def mousePressEvent(self, e: QtGui.QMouseEvent):
        self._pointer = qpoint_to_point(e.position())
        if e.button() == QtCore.Qt.MouseButton.LeftButton:
            self._primary_pressed = True
            self._primary_down = True
        elif e.button() == QtCore.Qt.MouseButton.RightButton:
            self._secondary_pressed = True

    def mouseMoveEvent(self, e: QtGui.QMouseEvent):
        self._pointer = qpoint_to_point(e.position())

    def mouseReleaseEvent(self, e: QtGui.QMouseEvent):
        self._pointer = qpoint_to_point(e.position())
        if e.button() == QtCore.Qt.MouseButton.LeftButton:
            self._primary_down = False

    def keyPressEvent(self, e: QtGui.QKeyEvent):
        if e.isAutoRepeat():
            return
        self._keys.add(int(e.key()))

    # ---------- tick ----------
    def _take_frame(self) -> InputFrame:
        keys = self._keys
        frame = InputFrame(
            pointer=self._pointer,
            primary_down=self._primary_down,
            primary_pressed=self._primary_pressed,
            secondary_pressed=self._secondary_pressed,
            toggle_bounding=int(QtCore.Qt.Key.Key_B) in keys,
            toggle_grid=int(QtCore.Qt.Key.Key_G) in keys,
            toggle_mode=int(QtCore.Qt.Key.Key_M) in keys,
        )
        self._primary_pressed = False
        self._secondary_pressed = False
        self._keys = set()
        return frame

    @QtCore.Slot()
    def _on_tick(self):
        frame = self._take_frame()
        mode = self._editor.curve.mode
        self._editor.tick(frame)

        if self._editor.curve.dirty:
            self.curveChanged.emit()
        if frame.toggle_bounding or frame.toggle_grid:
            self.togglesChanged.emit()
        if self._editor.curve.mode != mode:
            self.modeChanged.emit(self._editor.curve.mode)
        self.update()

    # ---------- painting ----------
    def draw_grid(self, sink: DrawSink) -> None:
        """16x9 grid centred on the view, with highlighted centre axes."""
        w, h = float(self.width()), float(self.height())
        wmid, hmid = w / 2.0, h / 2.0
        x_step = max(1.0, float(int(w / 16.0)))
        y_step = max(1.0, float(int(h / 9.0)))

        x = wmid
        while x >= 0.0:
            sink.line((x, 0.0), (x, h), 1.0, GREEN)
            x -= x_step
        x = wmid + x_step
        while x < w:
            sink.line((x, 0.0), (x, h), 1.0, GREEN)
            x += x_step

        y = hmid
        while y >= 0.0:
            sink.line((0.0, y), (w, y), 1.0, GREEN)
            y -= y_step
        y = hmid + y_step
        while y < h:
            sink.line((0.0, y), (w, y), 1.0, GREEN)
            y += y_step

        sink.circle((wmid, hmid), 5.0, YELLOW)
        sink.line((0.0, hmid), (w, hmid), 1.0, YELLOW)
        sink.line((wmid, 0.0), (wmid, h), 1.0, YELLOW)

    def paintEvent(self, event):
        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        painter.fillRect(self.rect(), BLACK.to_QColor())

        sink = QPainterSink(painter)
        # the order matters
        if self._editor.draw_grid:
            self.draw_grid(sink)
        self._editor.draw(sink)

        painter.end()
