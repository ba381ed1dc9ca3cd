from propgraph import Graph
from propgraph.display import format_edge, format_vertex


def test_format_vertex_uses_label_when_set() -> None:
    g = Graph()
    v = g.add_vertex("nolan", {"lastName": "Nolan", "age": "52"})
    assert format_vertex(v) == "[nolan] { age: 52, lastName: Nolan }"
    assert str(v) == format_vertex(v)


def test_format_vertex_falls_back_to_id() -> None:
    g = Graph()
    v = g.add_vertex()
    assert format_vertex(v) == f"[{v.id}] {{  }}"


def test_format_edge() -> None:
    g = Graph()
    a = g.add_vertex("a")
    b = g.add_vertex("b")
    e = g.add_edge("acted_in", a, b)
    assert format_edge(e, uppercase=True) == "[a] {  } --[ACTED_IN]--> [b] {  }"
    assert format_edge(e, uppercase=False) == "[a] {  } --[acted_in]--> [b] {  }"


def test_format_edge_follows_settings(monkeypatch) -> None:
    from propgraph.settings import settings

    g = Graph()
    e = g.add_edge("like", g.add_vertex("a"), g.add_vertex("b"))
    monkeypatch.setattr(settings, "uppercase_edge_labels", False)
    assert "--[like]-->" in str(e)
    monkeypatch.setattr(settings, "uppercase_edge_labels", True)
    assert "--[LIKE]-->" in str(e)
