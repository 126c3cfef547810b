import logging
import random

import networkx as nx
import pytest
from weighted_graph.graph import WeightedGraph
from weighted_graph.algorithms import bfs, dfs, dijkstra
from weighted_graph.exceptions import UnknownVertexError, UnreachableTargetError
from weighted_graph.export import to_networkx
from weighted_graph.observers import AlgorithmEvent, RecordingObserver


def make_graph(vertices, edges):
    g = WeightedGraph()
    for vertex in vertices:
        g.add_vertex(vertex)
    for u, v, weight in edges:
        g.add_edge(u, v, weight)
    return g


def observed(g):
    recorder = RecordingObserver()
    g.add_observer(recorder)
    return recorder


def tree_graph():
    #    A
    #   / \
    #  B   C
    # /   / \
    #D   E   F
    return make_graph(
        "ABCDEFG",
        [("A", "B", 1), ("A", "C", 1), ("B", "D", 1), ("C", "E", 1), ("C", "F", 1)],
    )


def brute_force_distances(g, start):
    """Minimum path weight to every reachable vertex, by enumerating simple paths."""
    best = {}

    def walk(vertex, cost, on_path):
        if vertex not in best or cost < best[vertex]:
            best[vertex] = cost
        for neighbor in g.neighbors(vertex):
            if neighbor not in on_path:
                walk(neighbor, cost + g.get_weight(vertex, neighbor), on_path | {neighbor})

    walk(start, 0, {start})
    return best


def random_graph(seed, n=7, edge_chance=0.35, max_weight=9):
    rng = random.Random(seed)
    g = make_graph(range(n), [])
    for u in range(n):
        for v in range(n):
            if u != v and rng.random() < edge_chance:
                g.add_edge(u, v, rng.randint(0, max_weight))
    return g


class TestBFS:
    def test_bfs_line(self):
        g = make_graph("ABC", [("A", "B", 1), ("B", "A", 1), ("B", "C", 1), ("C", "B", 1)])
        recorder = observed(g)

        assert bfs(g, "A", "C") == ["A", "B", "C"]
        assert recorder.kinds() == [
            AlgorithmEvent.BFS_BEGUN,
            AlgorithmEvent.VISIT,
            AlgorithmEvent.VISIT,
            AlgorithmEvent.VISIT,
            AlgorithmEvent.SEARCH_OVER,
        ]
        assert recorder.visited() == ["A", "B", "C"]

    def test_bfs_visits_level_by_level(self):
        g = tree_graph()
        assert bfs(g, "A", "F") == ["A", "B", "C", "D", "E", "F"]

    def test_bfs_stops_at_end(self):
        g = tree_graph()
        recorder = observed(g)
        assert bfs(g, "A", "C") == ["A", "B", "C"]
        assert recorder.kinds()[-1] == AlgorithmEvent.SEARCH_OVER
        assert recorder.kinds().count(AlgorithmEvent.SEARCH_OVER) == 1

    def test_bfs_start_is_end(self):
        g = tree_graph()
        recorder = observed(g)
        assert bfs(g, "A", "A") == ["A"]
        assert recorder.kinds() == [
            AlgorithmEvent.BFS_BEGUN, AlgorithmEvent.VISIT, AlgorithmEvent.SEARCH_OVER
        ]

    def test_bfs_unreachable_end_is_silent(self):
        g = tree_graph()
        recorder = observed(g)
        visited = bfs(g, "A", "G")
        assert set(visited) == set("ABCDEF")
        assert AlgorithmEvent.SEARCH_OVER not in recorder.kinds()

    def test_bfs_duplicate_queue_entries(self):
        # C is queued twice (from A and from B); it is visited on the first dequeue
        g = make_graph("ABCD", [("A", "B", 1), ("A", "C", 1), ("B", "C", 1), ("C", "D", 1)])
        recorder = observed(g)
        assert bfs(g, "A", "D") == ["A", "B", "C", "D"]
        assert recorder.kinds().count(AlgorithmEvent.SEARCH_OVER) == 1

    def test_bfs_visits_each_vertex_once(self):
        g = make_graph(range(4), [(0, 1, 1), (0, 2, 1), (1, 2, 1), (2, 0, 1), (2, 3, 1), (3, 3, 1)])
        g.add_vertex(99)
        visited = bfs(g, 2, 99)
        assert sorted(visited) == [0, 1, 2, 3]
        assert visited[0] == 2

    @pytest.mark.parametrize("seed", range(5))
    def test_bfs_hop_distance_is_non_decreasing(self, seed):
        g = random_graph(seed)
        g.add_vertex("unreachable")
        hops = nx.single_source_shortest_path_length(to_networkx(g), 0)

        visited = bfs(g, 0, "unreachable")
        assert set(visited) == set(hops)
        levels = [hops[v] for v in visited]
        assert levels == sorted(levels)

    def test_bfs_unknown_start(self):
        g = tree_graph()
        recorder = observed(g)
        with pytest.raises(UnknownVertexError, match="Vertex Z does not exist."):
            bfs(g, "Z", "A")
        assert recorder.events == []

    def test_bfs_unknown_end(self):
        g = tree_graph()
        with pytest.raises(UnknownVertexError, match="Vertex Z does not exist."):
            bfs(g, "A", "Z")

    def test_do_bfs_on_graph(self):
        g = tree_graph()
        assert g.do_bfs("A", "C") == bfs(g, "A", "C")


class TestDFS:
    def test_dfs_goes_deep_first(self):
        g = tree_graph()
        recorder = observed(g)
        # Last neighbor pushed is explored first
        assert dfs(g, "A", "D") == ["A", "C", "F", "E", "B", "D"]
        assert recorder.kinds()[0] == AlgorithmEvent.DFS_BEGUN
        assert recorder.kinds()[-1] == AlgorithmEvent.SEARCH_OVER

    def test_dfs_stops_at_end(self):
        g = tree_graph()
        assert dfs(g, "A", "F") == ["A", "C", "F"]

    def test_dfs_line(self):
        g = make_graph("ABC", [("A", "B", 1), ("B", "A", 1), ("B", "C", 1), ("C", "B", 1)])
        recorder = observed(g)
        assert dfs(g, "A", "C") == ["A", "B", "C"]
        assert recorder.kinds().count(AlgorithmEvent.SEARCH_OVER) == 1

    def test_dfs_start_is_end(self):
        g = make_graph("AB", [("A", "B", 1), ("B", "A", 1)])
        recorder = observed(g)
        assert dfs(g, "A", "A") == ["A"]
        assert recorder.kinds() == [
            AlgorithmEvent.DFS_BEGUN, AlgorithmEvent.VISIT, AlgorithmEvent.SEARCH_OVER
        ]

    def test_dfs_unreachable_end_is_silent(self):
        g = make_graph("ABC", [("A", "B", 1)])
        recorder = observed(g)
        assert dfs(g, "A", "C") == ["A", "B"]
        assert AlgorithmEvent.SEARCH_OVER not in recorder.kinds()

    def test_dfs_end_pushed_twice(self):
        # C is pushed by A and again by B; it is visited through B first
        g = make_graph("ABCD", [("A", "C", 1), ("A", "B", 1), ("B", "C", 1), ("C", "D", 1)])
        recorder = observed(g)
        assert dfs(g, "A", "C") == ["A", "B", "C"]
        assert recorder.kinds().count(AlgorithmEvent.SEARCH_OVER) == 1

    @pytest.mark.parametrize("seed", range(5))
    def test_dfs_never_visits_twice(self, seed):
        g = random_graph(seed)
        g.add_vertex("unreachable")
        recorder = observed(g)
        visited = dfs(g, 0, "unreachable")
        assert len(recorder.visited()) == len(set(recorder.visited()))
        assert set(visited) == set(nx.descendants(to_networkx(g), 0)) | {0}

    def test_dfs_unknown_start(self):
        g = tree_graph()
        with pytest.raises(UnknownVertexError, match="Vertex Z does not exist."):
            dfs(g, "Z", "A")

    def test_do_dfs_on_graph(self):
        g = tree_graph()
        assert g.do_dfs("A", "D") == dfs(g, "A", "D")


class TestDijkstra:
    def test_dijkstra_simple_path(self):
        g = make_graph("ABC", [("A", "B", 1), ("B", "C", 1), ("A", "C", 5)])
        recorder = observed(g)

        result = dijkstra(g, "A", "C")
        assert result.path == ["A", "B", "C"]
        assert result.cost == 2
        assert recorder.finished() == [("A", 0), ("B", 1), ("C", 2)]
        assert recorder.events[0] == (AlgorithmEvent.DIJKSTRA_BEGUN, ())
        assert recorder.events[-1] == (AlgorithmEvent.DIJKSTRA_OVER, (["A", "B", "C"],))

    def test_dijkstra_observer_costs_match_result(self):
        g = make_graph("ABCD", [("A", "B", 3), ("B", "C", 4), ("A", "C", 9), ("C", "D", 0)])
        recorder = observed(g)
        result = dijkstra(g, "A", "D")
        assert recorder.finished() == [(v, result.distances[v]) for v in result.finished_order]
        assert all(type(cost) is int for _, cost in recorder.finished())
        assert result.cost == 7

    def test_dijkstra_finishes_every_vertex(self):
        # End is finished early but the run keeps going
        g = make_graph("ABCD", [("A", "B", 1), ("B", "C", 10), ("C", "D", 10)])
        recorder = observed(g)
        result = dijkstra(g, "A", "B")
        assert result.path == ["A", "B"]
        assert result.finished_order == ["A", "B", "C", "D"]
        assert result.distances == {"A": 0, "B": 1, "C": 11, "D": 21}
        assert recorder.kinds().count(AlgorithmEvent.VERTEX_FINISHED) == 4

    def test_dijkstra_multiple_paths_selects_shortest(self):
        g = make_graph("SABC", [
            ("S", "A", 1), ("S", "B", 4), ("A", "B", 2), ("A", "C", 5), ("B", "C", 1),
        ])
        result = dijkstra(g, "S", "C")
        assert result.path == ["S", "A", "B", "C"]
        assert result.cost == 4
        assert result.predecessors["C"] == "B"
        assert result.predecessors["S"] is None

    def test_dijkstra_ties_go_to_first_vertex(self):
        g = make_graph("ABC", [("A", "C", 1), ("A", "B", 1)])
        result = dijkstra(g, "A", "C")
        assert result.finished_order == ["A", "B", "C"]

    def test_dijkstra_zero_weight_cycle(self):
        g = make_graph("ABC", [("A", "B", 0), ("B", "A", 0), ("B", "C", 0)])
        result = dijkstra(g, "A", "C")
        assert result.path == ["A", "B", "C"]
        assert result.cost == 0

    def test_dijkstra_start_is_end(self):
        g = make_graph("AB", [("A", "B", 1)])
        recorder = observed(g)
        result = dijkstra(g, "A", "A")
        assert result.path == ["A"]
        assert result.cost == 0
        assert recorder.events[-1] == (AlgorithmEvent.DIJKSTRA_OVER, (["A"],))

    def test_dijkstra_unreachable_end_raises(self):
        g = make_graph("ABC", [("A", "B", 1)])
        recorder = observed(g)
        with pytest.raises(UnreachableTargetError, match="Vertex C is not reachable from A.") as info:
            dijkstra(g, "A", "C")
        assert info.value.distances == {"A": 0, "B": 1}
        assert recorder.finished() == [("A", 0), ("B", 1)]
        assert AlgorithmEvent.DIJKSTRA_OVER not in recorder.kinds()

    def test_dijkstra_unreachable_end_logs_warning(self, caplog):
        g = make_graph("AB", [])
        with caplog.at_level(logging.WARNING, logger="weighted_graph.algorithms"):
            with pytest.raises(UnreachableTargetError):
                dijkstra(g, "A", "B")
        assert "could not reach B from A" in caplog.text

    def test_dijkstra_disconnected_but_end_reachable(self):
        g = make_graph("ABCD", [("A", "B", 2), ("C", "D", 1)])
        recorder = observed(g)
        result = dijkstra(g, "A", "B")
        assert result.path == ["A", "B"]
        assert result.distances == {"A": 0, "B": 2}
        assert recorder.kinds()[-1] == AlgorithmEvent.DIJKSTRA_OVER

    def test_dijkstra_unknown_vertices(self):
        g = make_graph("A", [])
        with pytest.raises(UnknownVertexError, match="Vertex Z does not exist."):
            dijkstra(g, "Z", "A")
        with pytest.raises(UnknownVertexError, match="Vertex Z does not exist."):
            dijkstra(g, "A", "Z")

    @pytest.mark.parametrize("seed", range(8))
    def test_dijkstra_matches_brute_force(self, seed):
        g = random_graph(seed)
        expected = brute_force_distances(g, 0)
        result = dijkstra(g, 0, 0)
        assert result.distances == expected

    @pytest.mark.parametrize("seed", range(8))
    def test_dijkstra_matches_networkx(self, seed):
        g = random_graph(seed, n=12, edge_chance=0.25)
        expected = nx.single_source_dijkstra_path_length(to_networkx(g), 0)
        result = dijkstra(g, 0, 0)
        assert result.distances == expected

    def test_dijkstra_path_costs_add_up(self):
        g = random_graph(42, n=10, edge_chance=0.5)
        for end in g.get_all_vertices():
            try:
                result = dijkstra(g, 0, end)
            except UnreachableTargetError:
                continue
            assert result.path[0] == 0
            assert result.path[-1] == end
            total = sum(g.get_weight(u, v) for u, v in zip(result.path, result.path[1:]))
            assert total == result.cost

    def test_do_dijkstra_on_graph(self):
        g = make_graph("ABC", [("A", "B", 1), ("B", "C", 1), ("A", "C", 5)])
        assert g.do_dijkstra("A", "C").path == ["A", "B", "C"]

    def test_graph_is_not_mutated(self):
        g = make_graph("ABC", [("A", "B", 1), ("B", "C", 1), ("A", "C", 5)])
        before = [(u, v, g.get_weight(u, v)) for u in g.get_all_vertices() for v in g.neighbors(u)]
        bfs(g, "A", "C")
        dfs(g, "A", "C")
        dijkstra(g, "A", "C")
        after = [(u, v, g.get_weight(u, v)) for u in g.get_all_vertices() for v in g.neighbors(u)]
        assert before == after
