"""
Módulo de validação.

Fornece validadores para o dimensionamento do filtro e para
amostras gravadas.
"""

from .base import Validator, ValidatorRegistry, ValidationResult, ValidationConfig
from .sample_type_validator import (
    SampleTypeValidator,
    InputRangeValidator,
    check_filter_config,
    max_input_value,
    required_bits,
)
from .service import ValidationService, VALIDATION_PRESETS, get_validation_preset

__all__ = [
    # Base
    "Validator",
    "ValidatorRegistry",
    "ValidationResult",
    "ValidationConfig",
    
    # Validators
    "SampleTypeValidator",
    "InputRangeValidator",
    "check_filter_config",
    "max_input_value",
    "required_bits",
    
    # Service
    "ValidationService",
    
    # Presets
    "VALIDATION_PRESETS",
    "get_validation_preset",
]
