import random

import networkx as nx
import pytest

from wgraph.algorithms.bfs import bfs_depth, bfs_layers, connected_components
from wgraph.exceptions import NodeRangeError
from wgraph.graph.convert import to_networkx
from wgraph.graph.io import parse_edge_list


class TestBFSDepth:
    def test_bfs_depth_square(self, square):
        assert bfs_depth(square, 0) == 2
        assert square.bfs_depth(1) == 2

    def test_bfs_depth_line(self, line5):
        assert bfs_depth(line5, 0) == 4
        assert bfs_depth(line5, 2) == 2
        assert bfs_depth(line5, 4) == 4

    def test_bfs_depth_ignores_costs(self, detour):
        # Hop count, not cost: 1-2 is a single hop despite cost 10
        assert bfs_layers(detour, 0) == {0: 0, 1: 1, 2: 1, 3: 2}
        assert bfs_depth(detour, 0) == 2

    def test_bfs_depth_stays_in_component(self, two_pairs):
        assert bfs_layers(two_pairs, 0) == {0: 0, 1: 1}
        assert bfs_depth(two_pairs, 2) == 1

    def test_bfs_depth_isolated_vertices(self, isolated):
        for node in range(isolated.vertices):
            assert bfs_depth(isolated, node) == 0

    def test_bfs_depth_accepts_typed_node(self, square):
        assert bfs_depth(square, square.node(3)) == 2

    def test_bfs_depth_out_of_range(self, square):
        with pytest.raises(NodeRangeError):
            bfs_depth(square, 4)
        with pytest.raises(IndexError):
            bfs_depth(square, -1)

    def test_bfs_depth_matches_networkx(self, random_edge_lines):
        for seed in range(5):
            graph = parse_edge_list(random_edge_lines(seed, 12, 10))
            nx_graph = to_networkx(graph)
            for start in range(graph.vertices):
                hops = nx.single_source_shortest_path_length(nx_graph, start)
                assert bfs_depth(graph, start) == max(hops.values())


class TestConnectedComponents:
    def test_components_square(self, square):
        assert connected_components(square) == 1
        assert square.connected_components() == 1

    def test_components_two_pairs(self, two_pairs):
        assert connected_components(two_pairs) == 2

    def test_components_no_edges(self, isolated):
        assert connected_components(isolated) == isolated.vertices

    def test_components_empty_graph(self):
        assert connected_components(parse_edge_list(["0 0"])) == 0

    def test_components_self_loop(self):
        graph = parse_edge_list(["3 1", "2 2 1"])
        assert connected_components(graph) == 3

    def test_components_invariant_under_edge_order(self, random_edge_lines):
        rng = random.Random(7)
        for seed in range(5):
            lines = random_edge_lines(seed, 15, 9)
            expected = connected_components(parse_edge_list(lines))
            header, edges = lines[0], lines[1:]
            for _ in range(3):
                rng.shuffle(edges)
                shuffled = parse_edge_list([header] + edges)
                assert connected_components(shuffled) == expected

    def test_components_match_networkx(self, random_edge_lines):
        for seed in range(5):
            graph = parse_edge_list(random_edge_lines(seed, 20, 12))
            expected = nx.number_connected_components(to_networkx(graph))
            assert connected_components(graph) == expected
