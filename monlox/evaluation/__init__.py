"""Tree-walking evaluation of Monlox syntax trees."""

from monlox.evaluation.evaluator import evaluate, apply_function
from monlox.evaluation.operators import is_truthy

__all__ = ["evaluate", "apply_function", "is_truthy"]
