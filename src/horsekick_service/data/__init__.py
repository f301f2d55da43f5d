"""Horse-kick table loading and cleaning."""

from .loader import clean_horse_kicks, load_horse_kicks, normalize_corps_label

__all__ = ["clean_horse_kicks", "load_horse_kicks", "normalize_corps_label"]
