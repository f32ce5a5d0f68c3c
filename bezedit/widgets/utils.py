from PySide6 import QtCore, QtGui

from bezedit.core import Color, DrawSink, Vec2


def qpoint_to_point(p: QtCore.QPointF) -> Vec2:
    return float(p.x()), float(p.y())

def point_to_qpoint(p: Vec2) -> QtCore.QPointF:
    return QtCore.QPointF(p[0], p[1])


class QPainterSink(DrawSink):
    """
    Paints draw primitives on an active QPainter.
    """

    def __init__(self, painter: QtGui.QPainter):
        self._painter = painter
        self._font = QtGui.QFont(painter.font())

    def circle(self, center: Vec2, radius: float, color: Color) -> None:
        self._painter.setPen(QtCore.Qt.PenStyle.NoPen)
        self._painter.setBrush(color.to_QColor())
        self._painter.drawEllipse(point_to_qpoint(center), radius, radius)

    def rect(self, pos: Vec2, color: Color, size: Vec2 = (1.0, 1.0)) -> None:
        self._painter.fillRect(QtCore.QRectF(pos[0], pos[1], size[0], size[1]), color.to_QColor())

    def line(self, a: Vec2, b: Vec2, width: float, color: Color) -> None:
        self._painter.setPen(QtGui.QPen(color.to_QColor(), width))
        self._painter.drawLine(point_to_qpoint(a), point_to_qpoint(b))

    def text(self, label: str, pos: Vec2, size: float, color: Color) -> None:
        self._font.setPixelSize(max(1, int(size * 0.75)))
        self._painter.setFont(self._font)
        self._painter.setPen(color.to_QColor())
        self._painter.drawText(point_to_qpoint(pos), label)
