"""
evonet - decoding and evaluation of evolved network genomes.

This package decodes a genome (a flat, ID-addressed description of a directed,
weighted graph) into an executable network and evaluates it against a vector
of inputs. Genome mutation, speciation and fitness evaluation live elsewhere.

Main components:
- genotype:    Node and connection genes, the Genome container
- phenotype:   Node and Network, the decoded executable graph
- run:         Configuration (number of sensors and outputs)
- activations: Activation function catalog
- errors:      ConfigurationError and InvalidInputError

Example:
    >>> from evonet import Config, Genome, decode
    >>> config = Config("config.ini")
    >>> genome = Genome.from_dict({"activation": "identity",
    ...                            "nodes": [{"id": 0}, {"id": 1}, {"id": 2}],
    ...                            "connections": [{"from": 0, "to": 2, "weight": 1.0},
    ...                                            {"from": 1, "to": 2, "weight": 2.0}]})
    >>> network = decode(genome, config)
    >>> network.activate([1.0, 3.0])
    [7.0]
"""

__version__ = "0.1.0"

from evonet.errors     import EvonetError, ConfigurationError, InvalidInputError
from evonet.run.config import Config
from evonet.genotype   import Genome, NodeGene, ConnectionGene
from evonet.phenotype  import Network, Node, decode

__all__ = [
    "Config",
    "ConfigurationError",
    "ConnectionGene",
    "EvonetError",
    "Genome",
    "InvalidInputError",
    "Network",
    "Node",
    "NodeGene",
    "decode",
]
