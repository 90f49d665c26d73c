"""
Node Gene Module.

This module implements the NodeGene class, the genome-side description
of a single network node.

Classes:
    NodeGene: Gene encoding a single network node
"""

from typing import Callable

from evonet.activations import activation_codes

class NodeGene:
    """
    A gene describing a node in a Neural Network.

    A node gene carries the identity of the node and a selector for its
    activation function. It says nothing about whether the node is a sensor,
    output or hidden node: that role is decided positionally when the genome
    is decoded, from the node's rank among all node IDs and the configured
    numbers of sensors and outputs.

    Public Attributes:
        id:         Unique identifier for this node
        activation: Activation selector, either the name of a function in the
                    activation catalog (e.g. 'tanh') or a callable float => float.
                    May be None, in which case decoding the node fails.
    """

    def __init__(self, node_id: int, activation: str | Callable[[float], float] | None = None):
        """
        Parameters:
            node_id:    Unique identifier for this node
            activation: Activation function name or callable
        """
        self.id        : int = node_id
        self.activation: str | Callable[[float], float] | None = activation

    @property
    def activation_name(self) -> str | None:
        """The activation name, or None if the selector is a callable (or missing)."""
        return self.activation if isinstance(self.activation, str) else None

    def __eq__(self, other):
        if not isinstance(other, NodeGene):
            return NotImplemented
        return self.id == other.id and self.activation == other.activation

    def __hash__(self):
        return hash((self.id, self.activation if isinstance(self.activation, str) else id(self.activation)))

    def __repr__(self):
        return f"NodeGene(node_id={self.id:+03d}, activation={self.activation!r})"

    def __str__(self):
        if self.activation_name is not None:
            act_code = activation_codes.get(self.activation_name, "???")
        elif self.activation is None:
            act_code = "---"
        else:
            act_code = "FUN"
        return f"[N{self.id},{act_code}]"
