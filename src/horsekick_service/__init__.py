"""
Horse-Kick Prediction Service.

Scores expected deaths by horse kick for Prussian army corps/year pairs:
- Request sanitization (required columns, bounds, corps membership, projection)
- Poisson-rate model handle loaded once at startup
- CSV loading and cleaning of the historical table

Architecture: FastAPI endpoint + staged sanitizer + immutable model handle
"""

__version__ = "0.1.0"
