"""
Phenotype Package

This package turns a genome into an executable network. Decoding builds one
Node per node gene and wires the enabled connections; activation evaluates
the network in a single pass over the nodes in ascending ID order.

Modules:
    node:    The Node class
    network: The Network class and the decode() function

Exported:
    Node:    A computational node with weighted inbound edges
    Network: Decoded network mapping inputs to outputs
    decode:  Decode a genome into a Network
"""

from evonet.phenotype.network import Network, decode
from evonet.phenotype.node    import Node

__all__ = ['Network',
           'Node',
           'decode']
