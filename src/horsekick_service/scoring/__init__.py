"""
Model scoring.

- model.py: PoissonRateModel handle and load_model()
- exceptions.py: ModelLoadError
"""

from .exceptions import ModelLoadError
from .model import DEFAULT_MODEL_PATH, PoissonRateModel, load_model

__all__ = [
    "DEFAULT_MODEL_PATH",
    "ModelLoadError",
    "PoissonRateModel",
    "load_model",
]
