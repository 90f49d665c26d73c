"""
Network Module

This module decodes a genome into an executable network and evaluates it.

Decoding sorts the node genes by ID, creates one Node per gene, and wires every
enabled connection whose endpoints both exist. The position of a node in the
sorted sequence decides its role:
    - Sensor nodes: [0, num_inputs)
    - Output nodes: [num_inputs, num_inputs + num_outputs)
    - Hidden nodes: [num_inputs + num_outputs, ...)

Ascending ID order stands in for topological order. New nodes receive higher
IDs than their ancestors, so for feed-forward genomes the order usually (not
always) respects data dependencies. Activation is a single pass over this
order: a node reading from a node that has not been updated yet in the current
pass sees the value left by the previous call (or 0.0). This is how recurrent
connections are evaluated; there is no cycle detection and no settling.

A Network is mutable state (the node signals). Calls to activate() on the same
instance must not run concurrently; separate instances share nothing.

Classes:
    Network: Decoded phenotype that maps inputs to outputs

Functions:
    decode: Decode a genome into a Network
"""

import bisect
import logging
from typing import Sequence, TYPE_CHECKING

import graphviz  # type: ignore

from evonet.errors         import ConfigurationError, InvalidInputError
from evonet.phenotype.node import Node

if TYPE_CHECKING:
    from evonet.genotype   import Genome
    from evonet.run.config import Config

logger = logging.getLogger(__name__)

class Network:
    """
    Executable network decoded from a genome.

    Public Methods:
        activate(inputs): Run one evaluation pass and return the output signals
        reset():          Set every node signal back to 0.0
        visualize(view):  Draw the decoded graph with Graphviz

    Public Properties:
        nodes:               All nodes, in ascending ID order
        sensor_nodes:        Nodes receiving the inputs
        output_nodes:        Nodes producing the outputs
        hidden_nodes:        All remaining nodes
        num_sensors:         Number of sensor nodes (configured)
        num_outputs:         Number of output nodes (configured)
        number_nodes:        Total number of nodes
        number_nodes_hidden: Number of hidden nodes
        number_connections:  Number of wired (inbound) edges
        signals:             Mapping of node ID to current signal
    """

    def __init__(self, genome: "Genome", config: "Config"):
        """
        Decode 'genome' into a network.

        Connections that are disabled, or that reference a node ID absent from
        the genome, are not wired. Dangling references are expected in evolving
        genomes and are not treated as errors.

        Parameters:
            genome: the Genome encoding the network
            config: provides 'num_inputs' and 'num_outputs'

        Raises:
            ConfigurationError: if a node's activation cannot be resolved, or the
                                genome has fewer nodes than num_inputs + num_outputs
        """
        self._num_sensors: int = config.num_inputs
        self._num_outputs: int = config.num_outputs

        node_genes = genome.node_genes
        if any(a.id > b.id for a, b in zip(node_genes, node_genes[1:])):
            node_genes = sorted(node_genes, key=lambda gene: gene.id)

        required = self._num_sensors + self._num_outputs
        if len(node_genes) < required:
            raise ConfigurationError(f"Genome has {len(node_genes)} nodes, but {self._num_sensors} sensors "
                                     f"and {self._num_outputs} outputs require at least {required}")

        # The order of this list fixes the sensor/output/hidden partition
        self._nodes   : list[Node] = [Node(gene) for gene in node_genes]
        self._node_ids: list[int]  = [node.id for node in self._nodes]

        wired, dropped = 0, 0
        for conn in genome.conn_genes:
            if not conn.enabled:
                continue
            target = self._find_node(conn.node_out)
            source = self._find_node(conn.node_in)
            if target is None or source is None:
                logger.debug("Dropping connection %d => %d: node not in genome", conn.node_in, conn.node_out)
                dropped += 1
                continue
            target.connect(source, conn.weight)
            wired += 1

        logger.debug("Decoded network: %d nodes, %d connections wired, %d dangling dropped",
                     len(self._nodes), wired, dropped)

    def _find_node(self, node_id: int) -> Node | None:
        """Binary search for the node with ID 'node_id' (None if absent)."""
        i = bisect.bisect_left(self._node_ids, node_id)
        if i < len(self._node_ids) and self._node_ids[i] == node_id:
            return self._nodes[i]
        return None

    @property
    def nodes(self) -> list[Node]:
        """All nodes, in ascending ID order."""
        return list(self._nodes)

    @property
    def sensor_nodes(self) -> list[Node]:
        return self._nodes[:self._num_sensors]

    @property
    def output_nodes(self) -> list[Node]:
        return self._nodes[self._num_sensors:self._num_sensors + self._num_outputs]

    @property
    def hidden_nodes(self) -> list[Node]:
        return self._nodes[self._num_sensors + self._num_outputs:]

    @property
    def num_sensors(self) -> int:
        return self._num_sensors

    @property
    def num_outputs(self) -> int:
        return self._num_outputs

    @property
    def number_nodes(self) -> int:
        """Total number of nodes in the network."""
        return len(self._nodes)

    @property
    def number_nodes_hidden(self) -> int:
        """Number of hidden nodes in the network."""
        return len(self._nodes) - self._num_sensors - self._num_outputs

    @property
    def number_connections(self) -> int:
        """Number of connections wired into the network."""
        return sum(len(node.inbound) for node in self._nodes)

    @property
    def signals(self) -> dict[int, float]:
        """Current signal of every node, keyed by node ID."""
        return {node.id: node.signal for node in self._nodes}

    def activate(self, inputs: Sequence[float]) -> list[float]:
        """
        Run one evaluation pass through the network.

        Sensor signals are set to the inputs (no activation applied), then
        every hidden node and finally every output node recomputes its signal,
        in ascending ID order. Signals persist between calls.

        Parameters:
            inputs: one value per sensor node

        Returns:
            the signals of the output nodes, in output-node order

        Raises:
            InvalidInputError: if the number of inputs differs from the number
                               of sensor nodes (no signal is modified)
        """
        if len(inputs) != self._num_sensors:
            raise InvalidInputError(self._num_sensors, len(inputs))

        for i in range(self._num_sensors):
            self._nodes[i].signal = float(inputs[i])

        h = self._num_sensors + self._num_outputs
        for i in range(h, len(self._nodes)):
            self._nodes[i].output()

        return [self._nodes[i].output() for i in range(self._num_sensors, h)]

    def reset(self) -> None:
        """Set the signal of every node back to 0.0, discarding recurrent state."""
        for node in self._nodes:
            node.signal = 0.0

    def visualize(self, view: bool = False) -> graphviz.Digraph:
        """
        Visualize the decoded network using Graphviz.

        Only wired connections are drawn: disabled and dangling connections
        of the genome do not exist in the network.

        Parameters:
            view: If True, automatically open the visualization after rendering

        Returns:
            graphviz.Digraph object representing the network
        """
        dot = graphviz.Digraph()
        dot.attr(rankdir='LR')  # Left to right layout
        dot.attr('graph', labelloc='t')

        base_attrs = {'color': 'black', 'style': 'filled', 'shape': 'circle', 'penwidth': '0.5',
                      'fontsize': '5', 'width': '0.5', 'height': '0.5', 'fixedsize': 'true'}
        groups = [('cluster_sensor', 'source', 'Sensors', 'lightgrey', self.sensor_nodes),
                  ('cluster_hidden', 'same',   'Hidden',  'lightblue', self.hidden_nodes),
                  ('cluster_output', 'sink',   'Outputs', 'white',     self.output_nodes)]

        for name, rank, label, fillcolor, nodes in groups:
            if not nodes:
                continue
            with dot.subgraph(name=name) as cluster:
                cluster.attr(rank=rank, label=label, style='invisible')
                for node in nodes:
                    cluster.node(str(node.id), label=f"id={node.id}\\ns={node.signal:.2f}",
                                 fillcolor=fillcolor, **base_attrs)

        for node in self._nodes:
            for source, weight in zip(node.inbound, node.weights):
                dot.edge(str(source.id), str(node.id), label=f"w={weight:.2f}",
                         fontsize='5', penwidth='0.5', arrowsize='0.5', labelfloat='false')

        if view:
            dot.view(cleanup=True)

        return dot

    def __str__(self):
        return "\n".join(f"  {node}" for node in self._nodes)

    def __repr__(self):
        return (f"Network(num_sensors={self._num_sensors}, num_outputs={self._num_outputs}, "
                f"nodes={self._node_ids})")

def decode(genome: "Genome", config: "Config") -> Network:
    """
    Decode a genome into an executable Network.

    Parameters:
        genome: the Genome encoding the network
        config: provides 'num_inputs' and 'num_outputs'

    Returns:
        the wired Network
    """
    return Network(genome, config)
