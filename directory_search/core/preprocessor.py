"""Preprocessing of raw field values into matchable text."""

from typing import Any, Dict, Type
from abc import ABC, abstractmethod
import logging
import pandas as pd

logger = logging.getLogger(__name__)

class BasePreprocessor(ABC):
    """Base class for preprocessors with common functionality."""

    @abstractmethod
    def process(self, value: Any) -> str:
        """Process a value into a matchable string."""
        pass

    def _handle_null(self, value: Any) -> bool:
        """Check if value is null/empty."""
        if value is None:
            return True
        try:
            return bool(pd.isna(value))
        except (TypeError, ValueError):
            # Containers make pd.isna return an array
            return False

class TextPreprocessor(BasePreprocessor):
    """Passes strings through untouched and maps anything else to ''."""

    def process(self, value: Any) -> str:
        if isinstance(value, str):
            return value
        if not self._handle_null(value):
            logger.debug(f"Treating non-string field value {value!r} as empty")
        return ''

class PreprocessorRegistry:
    """Registry for preprocessor types."""

    def __init__(self):
        self._preprocessors: Dict[str, Type[BasePreprocessor]] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default preprocessors."""
        self.register('text', TextPreprocessor)

    def register(self, name: str, preprocessor_class: Type[BasePreprocessor]) -> None:
        """
        Register a new preprocessor type.

        Args:
            name: Name to register the preprocessor under
            preprocessor_class: Preprocessor class to register
        """
        self._preprocessors[name] = preprocessor_class

    def create(self, name: str, **kwargs: Any) -> BasePreprocessor:
        """
        Create a preprocessor instance.

        Args:
            name: Name of the preprocessor type
            **kwargs: Configuration parameters for the preprocessor

        Returns:
            BasePreprocessor: Configured preprocessor instance

        Raises:
            ValueError: If preprocessor type not found
        """
        preprocessor_class = self._preprocessors.get(name)
        if not preprocessor_class:
            raise ValueError(f"Unknown preprocessor type: {name}")

        return preprocessor_class(**kwargs)

# Global registry instance
registry = PreprocessorRegistry()

def register_preprocessor(name: str, preprocessor_class: Type[BasePreprocessor]) -> None:
    """
    Register a new preprocessor type globally.

    Args:
        name: Name to register the preprocessor under
        preprocessor_class: Preprocessor class to register
    """
    registry.register(name, preprocessor_class)
