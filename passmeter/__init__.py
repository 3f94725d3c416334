"""PassMeter — explainable password strength scoring."""

from .evaluator import EvaluationResult, evaluate

__all__ = ["EvaluationResult", "evaluate"]
