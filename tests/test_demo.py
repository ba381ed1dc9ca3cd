import io

import pytest

from propgraph.cli.main import app, build_parser
from propgraph.demo import build_movie_graph, run_demo
from propgraph.settings import PropgraphSettings


def test_movie_graph_shape() -> None:
    g = build_movie_graph()
    assert len(g.all_vertices()) == 7
    assert len(g.all_edges()) == 7


def test_movie_graph_queries() -> None:
    g = build_movie_graph()
    movies = g.traversal().has("type", "movie")
    titles = [v.properties["title"] for v in movies.execute()]
    assert titles == ["Interstellar", "Inception"]
    assert len(movies.in_edges()) == 6
    assert [e.label for e in movies.out_edges()] == ["acquired"]

    fans = [v.properties["firstName"] for v in movies.in_().execute()]
    assert fans == ["Christopher", "Matt", "Jessica", "Thomas", "Christopher", "Matt"]
    assert [v.properties.get("distinction") for v in movies.out().execute()] == [
        "Oscar of the bests visual effects"
    ]


def test_run_demo_prints_sections() -> None:
    out = io.StringIO()
    run_demo(build_movie_graph(), out)
    text = out.getvalue()
    assert "Get all vertices of the graph" in text
    assert "Get all out vertices for movies" in text
    assert "--[ACQUIRED]-->" in text


def test_cli_version(capsys) -> None:
    from propgraph import __version__

    with pytest.raises(SystemExit) as exc:
        app(["version"])
    assert exc.value.code == 0
    assert capsys.readouterr().out.strip() == __version__


def test_cli_demo(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        app(["demo"])
    assert exc.value.code == 0
    assert "Get all in edges for movies" in capsys.readouterr().out


def test_cli_requires_subcommand() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("PROPGRAPH_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("PROPGRAPH_UPPERCASE_EDGE_LABELS", "false")
    s = PropgraphSettings()
    assert s.log_level == "DEBUG"
    assert s.uppercase_edge_labels is False


def test_cli_demo_lowercase_labels_do_not_leak(capsys) -> None:
    from propgraph import Graph
    from propgraph.settings import settings

    with pytest.raises(SystemExit) as exc:
        app(["demo", "--lowercase-labels"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert "--[acted_in]-->" in out
    assert "--[ACTED_IN]-->" not in out

    assert settings.uppercase_edge_labels is True
    g = Graph()
    assert "--[LIKE]-->" in str(g.add_edge("like", g.add_vertex("a"), g.add_vertex("b")))


def test_run_demo_uppercase_override() -> None:
    out = io.StringIO()
    run_demo(build_movie_graph(), out, uppercase=False)
    assert "--[acquired]-->" in out.getvalue()
