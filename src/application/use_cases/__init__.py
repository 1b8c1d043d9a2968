"""Application use cases package."""

from .refresh_portfolio import RefreshPortfolioUseCase
from .value_portfolio import ValuePortfolioUseCase

__all__ = [
    "RefreshPortfolioUseCase",
    "ValuePortfolioUseCase",
]
