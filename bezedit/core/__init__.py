from .color import Color
from .math import Point, Vec2, dist2, NoRealRoot, DegenerateAxis
from .evaluators import evaluate, SegmentEvaluator, DeCasteljauEvaluator, BernsteinEvaluator, CASTELJAU, BERNSTEIN
from .registries import evaluator_registry
from .bounding_box import BoundingBox, coarse_box, tight_box
from .config import EditorConfig
from .curve import Curve, InsufficientControlPoints
from .draw import DrawSink, PrimitiveRecorder
from .interaction import CurveEditor, InputFrame
