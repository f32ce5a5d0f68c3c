from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from .evaluators import SegmentEvaluator

evaluator_registry: dict[str, type["SegmentEvaluator"]] = {}


def register_evaluator(name: str):
    def _decorator(cls: type["SegmentEvaluator"]) -> type["SegmentEvaluator"]:
        if not name or name in evaluator_registry:
            raise ValueError(f"Invalid or duplicate evaluator name '{name}'")
        evaluator_registry[name] = cls
        return cls
    return _decorator
