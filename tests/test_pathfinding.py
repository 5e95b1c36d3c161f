import pytest

from costgraph import (
    NodeNotFoundError,
    NoPathError,
    new_directed_graph,
    new_undirected_graph,
    pyedge,
)


def _path_cost(graph, path):
    total = 0
    for node, neighbor in zip(path, path[1:]):
        costs = [edge.cost for edge in graph.edges() if edge.node == node and edge.neighbor == neighbor]
        assert costs, f"{node} -> {neighbor} is not an edge"
        total += min(costs)
    return total


def test_shortest_path_undirected(undirected_graph):
    path, cost = undirected_graph.shortest_path_and_cost("a", "e")

    assert path == ["a", "d", "e"]
    assert cost == 11


def test_all_shortest_paths_undirected(undirected_graph):
    paths, cost = undirected_graph.find_all_shortest_paths_and_cost("a", "e")

    assert sorted(paths) == [["a", "d", "c", "e"], ["a", "d", "e"]]
    assert cost == 11


def test_shortest_path_dag(dag):
    path, cost = dag.shortest_path_and_cost("5", "9")

    assert path == ["5", "11", "9"]
    assert cost == 10


def test_all_shortest_paths_dag(dag):
    paths, cost = dag.find_all_shortest_paths_and_cost("5", "13")

    assert sorted(paths) == [["5", "11", "9", "13"], ["5", "7", "8", "9", "13"]]
    assert cost == 13


def test_single_and_all_paths_agree_on_cost(undirected_graph, dag):
    for graph in (undirected_graph, dag):
        for source in graph.nodes():
            for target in graph.nodes():
                try:
                    path, cost = graph.shortest_path_and_cost(source, target)
                except NoPathError:
                    with pytest.raises(NoPathError):
                        graph.find_all_shortest_paths_and_cost(source, target)
                    continue

                paths, all_cost = graph.find_all_shortest_paths_and_cost(source, target)
                assert all_cost == cost
                assert path in paths
                assert len({tuple(p) for p in paths}) == len(paths)
                for p in paths:
                    assert p[0] == source
                    assert p[-1] == target
                    assert _path_cost(graph, p) == cost


def test_path_to_itself(undirected_graph):
    assert undirected_graph.shortest_path_and_cost("c", "c") == (["c"], 0)
    assert undirected_graph.find_all_shortest_paths_and_cost("c", "c") == ([["c"]], 0)


def test_unknown_endpoints(dag):
    with pytest.raises(NodeNotFoundError) as excinfo:
        dag.shortest_path_and_cost("5", "99")
    assert excinfo.value.node == "99"

    with pytest.raises(NodeNotFoundError):
        dag.find_all_shortest_paths_and_cost("99", "5")


def test_no_path_between_known_nodes(dag):
    with pytest.raises(NoPathError) as excinfo:
        dag.shortest_path_and_cost("13", "5")
    assert excinfo.value.source == "13"
    assert excinfo.value.target == "5"

    with pytest.raises(NoPathError):
        dag.find_all_shortest_paths_and_cost("3", "7")


def test_multi_edge_ties_do_not_duplicate_paths():
    graph = new_directed_graph()
    graph.add_with_cost(pyedge("a", "b", 2))
    graph.add_with_cost(pyedge("a", "b", 2))
    graph.add_with_cost(pyedge("b", "c", 1))

    paths, cost = graph.find_all_shortest_paths_and_cost("a", "c")

    assert paths == [["a", "b", "c"]]
    assert cost == 3


def test_cheaper_multi_edge_is_used():
    graph = new_directed_graph()
    graph.add_with_cost(pyedge("a", "b", 9))
    graph.add_with_cost(pyedge("a", "b", 2))

    assert graph.shortest_path_and_cost("a", "b") == (["a", "b"], 2)


def test_zero_cost_ties_are_found():
    graph = new_undirected_graph()
    graph.add_with_cost_both(pyedge("s", "x", 0))
    graph.add_with_cost_both(pyedge("x", "t", 0))
    graph.add_with_cost_both(pyedge("s", "t", 0))

    paths, cost = graph.find_all_shortest_paths_and_cost("s", "t")

    assert cost == 0
    assert sorted(paths) == [["s", "t"], ["s", "x", "t"]]


def test_grid_of_ties_enumerates_every_path():
    # 3x3 grid with unit costs pointing right and down: C(4, 2) = 6 paths
    graph = new_directed_graph()
    for row in range(3):
        for col in range(3):
            if col < 2:
                graph.add_with_cost(pyedge((row, col), (row, col + 1), 1))
            if row < 2:
                graph.add_with_cost(pyedge((row, col), (row + 1, col), 1))

    paths, cost = graph.find_all_shortest_paths_and_cost((0, 0), (2, 2))

    assert cost == 4
    assert len(paths) == 6
    assert len({tuple(p) for p in paths}) == 6


def test_limit_caps_enumeration(undirected_graph):
    paths, cost = undirected_graph.find_all_shortest_paths_and_cost("a", "e", limit=1)

    assert len(paths) == 1
    assert paths[0] in (["a", "d", "e"], ["a", "d", "c", "e"])
    assert cost == 11


def test_configured_cap_is_default_limit(monkeypatch, undirected_graph):
    from costgraph import get_config, reset_config

    monkeypatch.setenv("COSTGRAPH_MAX_SHORTEST_PATHS", "1")
    reset_config()
    assert get_config().max_shortest_paths == 1

    paths, _ = undirected_graph.find_all_shortest_paths_and_cost("a", "e")
    assert len(paths) == 1

    paths, _ = undirected_graph.find_all_shortest_paths_and_cost("a", "e", limit=5)
    assert len(paths) == 2
