"""
Genome Module

This module implements the Genome class, the flat description of a network
that is decoded into an executable Network.

Classes:
    Genome: Collection of node and connection genes
"""

from evonet.genotype.connection_gene import ConnectionGene
from evonet.genotype.node_gene       import NodeGene

class Genome:
    """
    A genome describing a network as a collection of node and connection genes.

    The genome is a plain container: genes may appear in any order, connection
    genes may reference node IDs that are not present, and several connections
    may join the same pair of nodes. None of this is validated here; decoding
    a genome into a Network decides how each case is handled.

    Mutation and crossover of genomes happen elsewhere; this class only
    stores and (de)serializes their result.

    Public Attributes:
        node_genes: List of NodeGene objects
        conn_genes: List of ConnectionGene objects

    Public Methods:
        to_dict(): Convert genome to dictionary representation

    Class Methods:
        from_dict(genome_dict): Create a genome from a dictionary description
    """

    def __init__(self,
                 node_genes: list[NodeGene]       | None = None,
                 conn_genes: list[ConnectionGene] | None = None):
        """
        Parameters:
            node_genes: the node genes (in any order)
            conn_genes: the connection genes (in any order)
        """
        self.node_genes: list[NodeGene]       = list(node_genes) if node_genes is not None else []
        self.conn_genes: list[ConnectionGene] = list(conn_genes) if conn_genes is not None else []

    @classmethod
    def from_dict(cls, genome_dict: dict) -> 'Genome':
        """
        Create a Genome from a dictionary description.

        Dictionary format:
            {
                "activation": "sigmoid",  # Optional default activation for all nodes
                "nodes": [
                    {"id": 0},
                    {"id": 1},
                    {"id": 2, "activation": "tanh"},
                    {"id": 3, "activation": "relu"}
                ],
                "connections": [
                    {"from": 0, "to": 3, "weight":  0.5, "enabled": true},
                    {"from": 1, "to": 3, "weight": -0.3},
                    {"from": 3, "to": 2, "weight":  1.5}
                ]
            }

        Activation function resolution:
        - Each node first looks for its own "activation" field
        - If not found, uses the global "activation" field
        - If neither exists, the node gene is created without an activation,
          and decoding the genome will fail with ConfigurationError

        Connections are copied as given ("enabled" defaults to true), even if
        they reference nodes that do not exist.

        Parameters:
            genome_dict: Dictionary describing the genome structure

        Returns:
            A new Genome object with the specified structure

        Raises:
            KeyError: If required fields are missing from the dictionary
        """
        default_activation = genome_dict.get("activation")

        node_genes = []
        for node_data in genome_dict["nodes"]:
            activation = node_data.get("activation", default_activation)
            node_genes.append(NodeGene(node_data["id"], activation))

        conn_genes = []
        for conn_data in genome_dict.get("connections", []):
            conn_genes.append(ConnectionGene(conn_data["from"],
                                             conn_data["to"],
                                             conn_data["weight"],
                                             conn_data.get("enabled", True)))

        return cls(node_genes, conn_genes)

    def to_dict(self) -> dict:
        """
        Convert the genome to a dictionary representation.

        This is the inverse operation of from_dict(). Every node carries its
        own "activation" field; nodes whose activation is a callable rather
        than a catalog name cannot be represented and raise ValueError.
        Gene order is preserved.

        Returns:
            Dictionary with the following structure:
            {
                "nodes": [
                    {"id": 0, "activation": "identity"},
                    {"id": 1, "activation": "tanh"}
                ],
                "connections": [
                    {"from": 0, "to": 1, "weight": 0.5, "enabled": true}
                ]
            }
        """
        nodes = []
        for node in self.node_genes:
            if node.activation is not None and node.activation_name is None:
                raise ValueError(f"Node {node.id} has a callable activation, which cannot be serialized")
            node_dict = {"id": node.id}
            if node.activation_name is not None:
                node_dict["activation"] = node.activation_name
            nodes.append(node_dict)

        connections = []
        for conn in self.conn_genes:
            connections.append({
                "from"   : conn.node_in,
                "to"     : conn.node_out,
                "weight" : conn.weight,
                "enabled": conn.enabled
            })

        return {
            "nodes"      : nodes,
            "connections": connections
        }

    def __str__(self):
        nodes_str = " ".join(str(node) for node in self.node_genes)
        conns_str = " ".join(str(conn) for conn in self.conn_genes)
        return f"{nodes_str}\n{conns_str}"

    def __repr__(self):
        return f"Genome(node_genes={self.node_genes!r}, conn_genes={self.conn_genes!r})"
