"""
Unit tests for the Node class.
"""

import pytest
from evonet.activations import relu_activation, tanh_activation
from evonet.errors import ConfigurationError
from evonet.genotype import NodeGene
from evonet.phenotype.node import Node


# ============================================================================
# Test Fixtures
# ============================================================================

@pytest.fixture
def identity_node():
    return Node(NodeGene(5, 'identity'))


@pytest.fixture
def source_nodes():
    """Two identity nodes with preset signals 2.0 and -3.0."""
    a = Node(NodeGene(0, 'identity'))
    b = Node(NodeGene(1, 'identity'))
    a.signal = 2.0
    b.signal = -3.0
    return a, b


# ============================================================================
# Test Classes
# ============================================================================

class TestNodeInit:
    """Test Node construction."""

    def test_id(self, identity_node):
        assert identity_node.id == 5

    def test_initial_state(self, identity_node):
        assert identity_node.inbound == []
        assert identity_node.weights == []
        assert identity_node.signal == 0.0

    def test_activation_from_name(self):
        node = Node(NodeGene(1, 'relu'))
        assert node.activation is relu_activation

    def test_activation_from_callable(self):
        node = Node(NodeGene(1, tanh_activation))
        assert node.activation is tanh_activation

    def test_missing_activation_raises(self):
        with pytest.raises(ConfigurationError):
            Node(NodeGene(1))

    def test_unknown_activation_raises(self):
        with pytest.raises(ConfigurationError, match="bogus"):
            Node(NodeGene(1, 'bogus'))

    def test_id_is_read_only(self, identity_node):
        with pytest.raises(AttributeError):
            identity_node.id = 7


class TestNodeConnect:
    """Test Node.connect."""

    def test_appends_aligned_edge(self, identity_node, source_nodes):
        a, b = source_nodes
        identity_node.connect(a, 0.5)
        identity_node.connect(b, -1.0)
        assert identity_node.inbound == [a, b]
        assert identity_node.weights == [0.5, -1.0]

    def test_same_source_replaces_weight(self, identity_node, source_nodes):
        a, b = source_nodes
        identity_node.connect(a, 0.5)
        identity_node.connect(b, -1.0)
        identity_node.connect(a, 4.0)
        assert identity_node.inbound == [a, b]
        assert identity_node.weights == [4.0, -1.0]

    def test_self_connection(self, identity_node):
        identity_node.connect(identity_node, 1.0)
        assert identity_node.inbound == [identity_node]


class TestNodeOutput:
    """Test Node.output."""

    def test_weighted_sum(self, identity_node, source_nodes):
        a, b = source_nodes
        identity_node.connect(a, 1.5)
        identity_node.connect(b, 2.0)
        # 2.0 * 1.5 + (-3.0) * 2.0 = -3.0
        assert identity_node.output() == -3.0
        assert identity_node.signal == -3.0

    def test_activation_applied(self, source_nodes):
        a, b = source_nodes
        node = Node(NodeGene(9, 'relu'))
        node.connect(b, 1.0)
        assert node.output() == 0.0

    def test_no_inbound_applies_activation_to_zero(self):
        node = Node(NodeGene(9, 'sigmoid'))
        assert node.output() == pytest.approx(0.5)

    def test_returns_python_float(self, identity_node, source_nodes):
        identity_node.connect(source_nodes[0], 1.0)
        assert type(identity_node.output()) is float

    def test_depends_only_on_current_signals(self, identity_node, source_nodes):
        a, _ = source_nodes
        identity_node.connect(a, 1.0)
        assert identity_node.output() == 2.0
        assert identity_node.output() == 2.0
        a.signal = 10.0
        assert identity_node.output() == 10.0

    def test_self_connection_reads_previous_signal(self, identity_node):
        identity_node.connect(identity_node, 2.0)
        identity_node.signal = 1.0
        assert identity_node.output() == 2.0
        assert identity_node.output() == 4.0


class TestNodeStringRepresentation:
    """Test __str__ and __repr__."""

    def test_str(self, identity_node, source_nodes):
        identity_node.connect(source_nodes[0], 0.5)
        node_str = str(identity_node)
        assert "Node(+05" in node_str
        assert "0:+0.50" in node_str

    def test_repr(self, identity_node, source_nodes):
        identity_node.connect(source_nodes[1], 0.5)
        assert repr(identity_node) == "Node(id=5, inbound=[1], weights=[0.5])"
