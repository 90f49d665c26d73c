"""
Activations Package

This package provides the activation functions available to network nodes.

Exported:
    activations:        Dictionary mapping activation function names to functions
    activation_codes:   Dictionary mapping activation function names to 3-letter codes
    resolve_activation: Turn a name or callable into an activation function
    Individual activation functions: identity_activation, clamped_activation,
                                     relu_activation, sigmoid_activation, tanh_activation,
                                     sin_activation, gauss_activation, step_activation,
                                     square_activation, cubed_activation, log_activation,
                                     inverse_activation, exponential_activation,
                                     abs_activation
"""

from evonet.activations.basic_activations import (
    activations,
    activation_codes,
    resolve_activation,
    identity_activation,
    clamped_activation,
    relu_activation,
    sigmoid_activation,
    tanh_activation,
    sin_activation,
    gauss_activation,
    step_activation,
    square_activation,
    cubed_activation,
    log_activation,
    inverse_activation,
    exponential_activation,
    abs_activation
)

__all__ = [
    'activations',
    'activation_codes',
    'resolve_activation',
    'identity_activation',
    'clamped_activation',
    'relu_activation',
    'sigmoid_activation',
    'tanh_activation',
    'sin_activation',
    'gauss_activation',
    'step_activation',
    'square_activation',
    'cubed_activation',
    'log_activation',
    'inverse_activation',
    'exponential_activation',
    'abs_activation'
]
