from dsakit.graph import Graph


def test_undirected_edge_goes_both_ways():
    g = Graph()
    g.add_edge(1, 2, False)
    assert g.neighbours(1) == [2]
    assert g.neighbours(2) == [1]


def test_directed_edge_one_way():
    g = Graph()
    g.add_edge(1, 2, True)
    assert g.neighbours(1) == [2]
    assert g.neighbours(2) == []
    assert 2 not in g


def test_neighbours_preserve_insertion_order():
    g = Graph()
    for v in (5, 3, 9):
        g.add_edge(0, v, False)
    assert g.neighbours(0) == [5, 3, 9]
    assert len(g) == 4


def test_neighbours_returns_copy():
    g = Graph()
    g.add_edge(1, 2, True)
    g.neighbours(1).append(99)
    assert g.neighbours(1) == [2]


def test_format_adjacency():
    g = Graph()
    g.add_edge(1, 2, False)
    g.add_edge(1, 3, False)
    assert g.format_adjacency() == "1->2 , 3 , \n2->1 , \n3->1 , \n"


def test_format_empty():
    assert Graph().format_adjacency() == ""