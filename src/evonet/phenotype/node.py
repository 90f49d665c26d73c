"""
Node Module

This module implements the Node class, the phenotype unit of a decoded network.

Classes:
    Node: A computational node holding a signal and its weighted inbound edges
"""

from typing import Callable, TYPE_CHECKING

from evonet.activations import resolve_activation

if TYPE_CHECKING:
    from evonet.genotype import NodeGene

class Node:
    """
    A computational node in a decoded network.

    The node reads the signals of its inbound nodes, multiplies each by the
    weight of the corresponding edge, and passes the sum through its
    activation function:
        signal = activation(sum(inbound[i].signal * weights[i]))

    Inbound nodes are references into the list of nodes owned by the Network;
    'weights' is aligned with 'inbound' by position. A given source appears
    at most once among the inbound nodes.

    Public Attributes:
        inbound: Nodes this node reads its signal from
        weights: Edge weights, weights[i] belonging to inbound[i]
        signal:  The most recently computed (or injected) output value

    Public Properties:
        id:         Identity of the node (the ID of its NodeGene)
        activation: The activation function, fixed at creation

    Public Methods:
        connect(source, weight): Add (or re-weight) an inbound edge
        output():                Recompute and return the signal
    """

    def __init__(self, gene: "NodeGene"):
        """
        Parameters:
            gene: the gene encoding the node

        Raises:
            ConfigurationError: if the gene's activation selector cannot be resolved
        """
        self._id        : int                       = gene.id
        self._activation: Callable[[float], float] = resolve_activation(gene.activation)

        self.inbound: list[Node]  = []
        self.weights: list[float] = []
        self.signal : float       = 0.0

    @property
    def id(self) -> int:
        """The identity of the node, unique within its network."""
        return self._id

    @property
    def activation(self) -> Callable[[float], float]:
        """The activation function applied to the weighted sum of inbound signals."""
        return self._activation

    def connect(self, source: "Node", weight: float) -> None:
        """
        Record an inbound edge from 'source' carrying 'weight'.
        If 'source' is already an inbound node, its weight is replaced.

        Parameters:
            source: the node whose signal this node will read
            weight: multiplier applied to the source signal
        """
        for i, node in enumerate(self.inbound):
            if node is source:
                self.weights[i] = weight
                return
        self.inbound.append(source)
        self.weights.append(weight)

    def output(self) -> float:
        """
        Compute the signal from the current signals of the inbound nodes.
        The result is saved in 'self.signal'.

        Returns:
            the new signal
        """
        total = sum((node.signal * weight for node, weight in zip(self.inbound, self.weights)), 0.0)
        self.signal = float(self._activation(total))
        return self.signal

    def __str__(self):
        edges = ", ".join(f"{node.id}:{weight:+.2f}" for node, weight in zip(self.inbound, self.weights))
        return f"Node({self._id:+03d}, signal={self.signal:.4f}, inbound=[{edges}])"

    def __repr__(self):
        return f"Node(id={self._id}, inbound={[node.id for node in self.inbound]}, weights={self.weights})"
