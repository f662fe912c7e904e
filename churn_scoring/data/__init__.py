"""Data module for loading and preparing customer tables."""

from .data_loader import DataLoader
from .preprocessor import CustomerPreprocessor

__all__ = ["DataLoader", "CustomerPreprocessor"]
