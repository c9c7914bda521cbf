"""
Utility functions for the Orrery package.
"""

import warnings
import numpy as np
from typing import Type
from .config import config


def validation_error(message: str, error_class: Type[Exception] = ValueError):
    """
    Raise error or warn based on config.STRICT_VALIDATION.
    
    This function provides consistent validation behavior for authored
    configuration (orbital elements, bodies, catalogs). When
    STRICT_VALIDATION is True (default), raises the specified exception.
    When False, issues a UserWarning instead.
    
    Parameters
    ----------
    message : str
        Validation error message
    error_class : Type[Exception], optional
        Exception class to raise if STRICT_VALIDATION is True.
        Default: ValueError
    
    Raises
    ------
    Exception (of type error_class)
        If config.STRICT_VALIDATION is True
    
    Warns
    -----
    UserWarning
        If config.STRICT_VALIDATION is False
    
    Examples
    --------
    >>> from orrery.utils import validation_error
    >>> from orrery import config, CatalogError
    >>> config.STRICT_VALIDATION = True
    >>> validation_error("Eccentricity out of range")  # Raises ValueError
    >>> validation_error("Unknown parent 'Earth'", CatalogError)  # Raises CatalogError
    
    >>> config.STRICT_VALIDATION = False
    >>> validation_error("Eccentricity out of range")  # Issues warning
    """
    if config.STRICT_VALIDATION:
        raise error_class(message)
    else:
        warnings.warn(message, UserWarning, stacklevel=3)


def frozen_vector(values) -> np.ndarray:
    """Copy values into a read-only float array"""
    vec = np.array(values, dtype=float)
    vec.flags.writeable = False
    return vec
