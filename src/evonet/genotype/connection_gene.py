"""
Connection Gene Module

This module implements the ConnectionGene class, the genome-side description
of a weighted connection between two nodes.

Classes:
    ConnectionGene: Gene encoding a weighted connection between nodes
"""

class ConnectionGene:
    """
    A gene describing a weighted connection between two nodes in a Neural Network.

    Each connection gene represents a directed edge in the network graph,
    carrying signal from a source node to a destination node. Disabled
    connections are kept in the genome but are never wired into a decoded
    network.

    The node IDs are not checked against the genome: after structural mutation
    a connection may reference a node that no longer exists. Such connections
    are dropped when the genome is decoded.

    Public Attributes:
        node_in:  ID of the source node
        node_out: ID of the destination node
        weight:   Weight of the connection
        enabled:  Whether this connection is active in the network
    """

    def __init__(self,
                 node_in : int,
                 node_out: int,
                 weight  : float,
                 enabled : bool = True):
        """
        Parameters:
            node_in:  ID of the source node
            node_out: ID of the destination node
            weight:   Weight of the connection
            enabled:  Whether this connection is active in the network
        """
        self.node_in : int   = node_in
        self.node_out: int   = node_out
        self.weight  : float = float(weight)
        self.enabled : bool  = bool(enabled)

    def __eq__(self, other):
        if not isinstance(other, ConnectionGene):
            return NotImplemented
        return (self.node_in, self.node_out, self.weight, self.enabled) == \
               (other.node_in, other.node_out, other.weight, other.enabled)

    def __hash__(self):
        return hash((self.node_in, self.node_out, self.weight, self.enabled))

    def __repr__(self):
        return (f"ConnectionGene(node_in={self.node_in:03d}, node_out={self.node_out:03d},"
                f"weight={self.weight:+.6f}, enabled={self.enabled})")

    def __str__(self):
        return f"[{'E' if self.enabled else 'D'},{self.node_in:02d}=>{self.node_out:02d},{self.weight:+.02f}]"
