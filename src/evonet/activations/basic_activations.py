"""
Activation Catalog Module

Scalar activation functions available to network nodes, the catalog mapping
activation names to functions, and the resolver used while decoding a genome.
"""

import numpy as np
from typing import Callable

from evonet.errors import ConfigurationError

def identity_activation(z):
    return z

def clamped_activation(z):
    return np.clip(z, -1.0, 1.0)

def relu_activation(z):
    return np.maximum(0.0, z)

def sigmoid_activation(z):
    K = 10
    Z = K * z
    Z = np.clip(Z, -100, 100)   # to prevent under/overflow when calculating exp
    return 1.0 / (1.0 + np.exp(-Z))

def tanh_activation(z):
    return np.tanh(z)

def sin_activation(z):
    return np.sin(z)

def gauss_activation(z):
    z_clipped = np.clip(z, -3.4, 3.4)
    return np.exp(-5.0 * z_clipped ** 2)

def step_activation(z):
    return np.where(z > 0.0, 1.0, 0.0)

def square_activation(z):
    # Clip input to avoid overflow (±1e154 squared stays within float64 range)
    z_clipped = np.clip(z, -1e154, 1e154)
    return z_clipped ** 2

def cubed_activation(z):
    # Clip input to avoid overflow (±1e102 cubed stays within float64 range)
    z_clipped = np.clip(z, -1e102, 1e102)
    return z_clipped ** 3

def log_activation(z):
    # Returns log(1e-7) ≈ -16.1 for z <= 0
    z_safe = np.maximum(z, 1e-7)
    return np.log(z_safe)

def inverse_activation(z):
    # Returns 1e7 for z=0, and caps magnitude at 1e7 for |z| < 1e-7
    z_safe = np.where(z == 0, 1e-7, z)
    z_safe = np.where(np.abs(z_safe) < 1e-7, np.sign(z_safe) * 1e-7, z_safe)
    return 1.0 / z_safe

def exponential_activation(z):
    z_clipped = np.clip(z, -100, 100)
    return np.exp(z_clipped)

def abs_activation(z):
    return np.abs(z)

activations = {
    "identity"   : identity_activation,
    "clamped"    : clamped_activation,
    "relu"       : relu_activation,
    "sigmoid"    : sigmoid_activation,
    "tanh"       : tanh_activation,
    "sin"        : sin_activation,
    "gauss"      : gauss_activation,
    "step"       : step_activation,
    "square"     : square_activation,
    "cubed"      : cubed_activation,
    "log"        : log_activation,
    "inverse"    : inverse_activation,
    "exponential": exponential_activation,
    "abs"        : abs_activation
    }

# 3-letter identifiers for each activation function
activation_codes = {
    "identity"   : "IDN",
    "clamped"    : "CLP",
    "relu"       : "RLU",
    "sigmoid"    : "SIG",
    "tanh"       : "TNH",
    "sin"        : "SIN",
    "gauss"      : "GAU",
    "step"       : "STP",
    "square"     : "SQR",
    "cubed"      : "CUB",
    "log"        : "LOG",
    "inverse"    : "INV",
    "exponential": "EXP",
    "abs"        : "ABS"
    }

def resolve_activation(selector: str | Callable[[float], float] | None) -> Callable[[float], float]:
    """
    Turn an activation selector into an activation function.

    Parameters:
        selector: the name of a function in the catalog, or a callable
                  mapping a float to a float (used as-is)

    Returns:
        The activation function.

    Raises:
        ConfigurationError: if the selector is None, an unknown name, or
                            neither a string nor a callable
    """
    if selector is None:
        raise ConfigurationError("No activation function specified")
    if isinstance(selector, str):
        try:
            return activations[selector]
        except KeyError:
            raise ConfigurationError(f"Unknown activation function '{selector}'") from None
    if callable(selector):
        return selector
    raise ConfigurationError(f"Invalid activation selector: {selector!r}")
