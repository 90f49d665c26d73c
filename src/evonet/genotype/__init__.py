"""
Genotype Package

This package implements the genome-side descriptors that are decoded into
executable networks.

A genome consists of two types of genes:
- Node genes:       Identify a node and select its activation function
- Connection genes: Describe a weighted, possibly disabled, edge between two nodes

Modules:
    node_gene:       NodeGene class
    connection_gene: ConnectionGene class
    genome:          Genome class

Exported Classes:
    NodeGene:       Gene encoding a single network node
    ConnectionGene: Gene encoding a weighted connection between nodes
    Genome:         Collection of node and connection genes
"""

from evonet.genotype.connection_gene import ConnectionGene
from evonet.genotype.genome          import Genome
from evonet.genotype.node_gene       import NodeGene

__all__ = ['ConnectionGene',
           'Genome',
           'NodeGene']
