"""
XOR and recurrent-memory examples for evonet.

The first example decodes a hand-wired XOR genome (two inputs, a constant bias
sensor, two hidden nodes, one output) and evaluates it on the four XOR cases.
The genome also holds a disabled connection and a connection to a node that no
longer exists; neither is wired into the network.

The second example shows how a recurrent connection is evaluated: a hidden
node reading from the output node sees the output of the previous call.

Usage:
    python examples/xor_network.py
"""

import logging
from pathlib import Path

from evonet import Config, Genome, decode

XOR_GENOME = {
    "nodes": [
        {"id": 0}, {"id": 1}, {"id": 2},   # sensors: a, b, bias
        {"id": 3},                         # output
        {"id": 4}, {"id": 5},              # hidden: OR, AND
    ],
    "connections": [
        {"from": 0, "to": 4, "weight":  2.0},
        {"from": 1, "to": 4, "weight":  2.0},
        {"from": 2, "to": 4, "weight": -1.0},
        {"from": 0, "to": 5, "weight":  2.0},
        {"from": 1, "to": 5, "weight":  2.0},
        {"from": 2, "to": 5, "weight": -3.0},
        {"from": 4, "to": 3, "weight":  2.0},
        {"from": 5, "to": 3, "weight": -2.0},
        {"from": 2, "to": 3, "weight": -1.0},
        {"from": 0, "to": 3, "weight":  9.0, "enabled": False},
        {"from": 6, "to": 3, "weight":  9.0},
    ]
}

MEMORY_GENOME = {
    "activation": "identity",
    "nodes": [{"id": 0}, {"id": 1}, {"id": 2}],
    "connections": [
        {"from": 0, "to": 1, "weight": 1.0},   # sensor => output
        {"from": 1, "to": 2, "weight": 1.0},   # output => hidden (read one call late)
    ]
}

def run_xor() -> None:
    config = Config(str(Path(__file__).parent / "configs" / "config_xor.ini"))

    genome_dict = dict(XOR_GENOME, activation=config.activation)
    network = decode(Genome.from_dict(genome_dict), config)
    print(f"XOR network: {network.number_nodes} nodes, {network.number_connections} connections")

    for a, b in [(0, 0), (0, 1), (1, 0), (1, 1)]:
        [output] = network.activate([a, b, 1.0])
        print(f"  {a} XOR {b} = {output:.4f}")

def run_memory() -> None:
    config = Config()
    config.num_inputs  = 1
    config.num_outputs = 1

    network = decode(Genome.from_dict(MEMORY_GENOME), config)
    hidden  = network.hidden_nodes[0]
    for value in [5.0, 9.0, -2.0]:
        [output] = network.activate([value])
        print(f"  input={value:+.1f}  output={output:+.1f}  hidden={hidden.signal:+.1f}")

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="[%(levelname)s] %(name)s: %(message)s")
    run_xor()
    print("Recurrent memory:")
    run_memory()
