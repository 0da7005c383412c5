"""
Tests for the Pydantic Vertex, Edge and Path models.

These tests verify identity semantics (what makes two vertices, edges or
paths the same), default values, and the validity rules a Path enforces
when it is built or extended.
"""

import json
import pytest
from pydantic import ValidationError

from pathgraph import Vertex, Edge, Path


class TestVertex:
    """Test the Pydantic Vertex model."""

    def test_vertex_creation(self):
        """Test basic vertex creation and the name default."""
        vertex = Vertex(id=7)

        assert vertex.id == 7
        assert vertex.name == "7"

    def test_vertex_with_name(self):
        """Test vertex creation with an explicit name."""
        vertex = Vertex(id=1, name="pump")

        assert vertex.name == "pump"
        assert str(vertex) == "ID=1, Name='pump'"

    def test_vertex_identity_ignores_name(self):
        """Vertices with the same id are equal whatever their names."""
        assert Vertex(id=1, name="a") == Vertex(id=1, name="b")
        assert Vertex(id=1) != Vertex(id=2)
        assert hash(Vertex(id=1, name="a")) == hash(Vertex(id=1, name="b"))
        assert len({Vertex(id=1), Vertex(id=1, name="x"), Vertex(id=2)}) == 2

    def test_vertex_id_coercion(self):
        """Test integer-like ids are coerced."""
        vertex = Vertex.model_validate({"id": "42"})

        assert vertex.id == 42
        assert vertex.name == "42"

    def test_vertex_validation_errors(self):
        """Test invalid ids are rejected."""
        with pytest.raises(ValidationError):
            Vertex(id="not-a-number")

    def test_vertex_is_immutable(self):
        """Test vertices cannot be changed after creation."""
        vertex = Vertex(id=1)

        with pytest.raises(ValidationError):
            vertex.name = "renamed"


class TestEdge:
    """Test the Pydantic Edge model."""

    def test_edge_creation(self):
        """Test basic edge creation and defaults."""
        edge = Edge(from_id=1, to_id=2)

        assert edge.from_id == 1
        assert edge.to_id == 2
        assert edge.weight == 1
        assert edge.label == "1->2"
        assert edge.key == (1, 2)

    def test_edge_between_vertices(self):
        """Test building an edge from vertices uses their names for the label."""
        edge = Edge.between(Vertex(id=1, name="src"), Vertex(id=2, name="dst"), weight=5)

        assert edge.key == (1, 2)
        assert edge.weight == 5
        assert edge.label == "src->dst"

    def test_edge_identity_is_endpoint_pair(self):
        """Weight and label play no part in edge equality."""
        a = Edge(from_id=1, to_id=2, weight=1, label="x")
        b = Edge(from_id=1, to_id=2, weight=99, label="y")

        assert a == b
        assert hash(a) == hash(b)
        assert a != Edge(from_id=2, to_id=1)

    def test_edge_is_mutable_presentation(self):
        """Test weight and label can be changed with validation."""
        edge = Edge(from_id=1, to_id=2)

        edge.weight = 3
        edge.label = "renamed"
        assert edge.weight == 3
        assert edge.label == "renamed"

        with pytest.raises(ValidationError):
            edge.weight = "heavy"

    def test_edge_reverse(self):
        """Test creating the mirror edge."""
        edge = Edge(from_id=1, to_id=2, weight=10, label="1->2")
        mirror = edge.reverse()

        assert mirror.key == (2, 1)
        assert mirror.weight == 10
        assert mirror.label == "2->1"
        assert edge.reverse(label="back").label == "back"

    def test_self_loop_detection(self):
        """Test self-loop detection."""
        assert Edge(from_id=3, to_id=3).is_self_loop is True
        assert Edge(from_id=3, to_id=4).is_self_loop is False

    def test_edge_str(self):
        """Test the display format."""
        edge = Edge(from_id=2, to_id=3, weight=4, label="2->3")
        assert str(edge) == "(2 -> 3) Label='2->3' Weight=4"

    def test_edge_serialization(self):
        """Test Pydantic serialization methods."""
        edge = Edge(from_id=1, to_id=2, weight=8)

        edge_dict = edge.model_dump()
        assert edge_dict == {"from_id": 1, "to_id": 2, "weight": 8, "label": "1->2"}

        parsed = json.loads(edge.model_dump_json())
        assert parsed["from_id"] == 1
        assert parsed["weight"] == 8


class TestPath:
    """Test Path construction and validity."""

    def test_path_from_edge(self):
        """A single positive edge makes a valid path."""
        edge = Edge(from_id=1, to_id=2, weight=3)
        path = Path.from_edge(edge)

        assert path.is_valid
        assert path.start == 1
        assert path.end == 2
        assert path.length == 3
        assert path.vertices == (1, 2)
        assert path.edges == (edge,)
        assert len(path) == 1

    def test_self_loop_path_is_invalid(self):
        """A self-loop never makes a path."""
        path = Path.from_edge(Edge(from_id=1, to_id=1))

        assert not path.is_valid
        assert path == Path.empty()

    def test_non_positive_weight_path_is_invalid(self):
        """Zero and negative weights make invalid single-edge paths."""
        assert not Path.from_edge(Edge(from_id=1, to_id=2, weight=0)).is_valid
        assert not Path.from_edge(Edge(from_id=1, to_id=2, weight=-4)).is_valid

    def test_missing_edge_gives_empty_path(self):
        """Test None edges give the sentinel."""
        assert not Path.from_edge(None).is_valid
        assert not Path.from_edge(Edge(from_id=1, to_id=2)).extend(None).is_valid

    def test_extend_path(self):
        """Extending sums weights and appends the new vertex."""
        first = Edge(from_id=1, to_id=2, weight=10)
        second = Edge(from_id=2, to_id=3, weight=20)

        path = Path.from_edge(first).extend(second)

        assert path.is_valid
        assert path.start == 1
        assert path.end == 3
        assert path.length == 30
        assert path.vertices == (1, 2, 3)
        assert path.edges == (first, second)

    def test_extend_requires_contiguous_edge(self):
        """An edge that does not leave the current end cannot extend."""
        path = Path.from_edge(Edge(from_id=1, to_id=2))

        assert not path.extend(Edge(from_id=3, to_id=4)).is_valid

    def test_extend_rejects_revisit(self):
        """A path never revisits a vertex."""
        path = Path.from_edge(Edge(from_id=1, to_id=2)).extend(Edge(from_id=2, to_id=3))

        assert not path.extend(Edge(from_id=3, to_id=1)).is_valid
        assert not path.extend(Edge(from_id=3, to_id=2)).is_valid

    def test_extend_rejects_non_positive_total(self):
        """A negative edge that drags the total to zero or below is invalid."""
        path = Path.from_edge(Edge(from_id=1, to_id=2, weight=2))

        assert not path.extend(Edge(from_id=2, to_id=3, weight=-2)).is_valid
        assert path.extend(Edge(from_id=2, to_id=3, weight=-1)).is_valid

    def test_path_equality_includes_route(self):
        """Same endpoints and length but different routes are different paths."""
        via_two = Path.from_edge(Edge(from_id=1, to_id=2)).extend(Edge(from_id=2, to_id=4))
        via_three = Path.from_edge(Edge(from_id=1, to_id=3)).extend(Edge(from_id=3, to_id=4))
        again = Path.from_edge(Edge(from_id=1, to_id=2)).extend(Edge(from_id=2, to_id=4))

        assert via_two.start == via_three.start
        assert via_two.end == via_three.end
        assert via_two.length == via_three.length
        assert via_two != via_three
        assert via_two == again
        assert hash(via_two) == hash(again)

    def test_path_is_immutable(self):
        """Test paths cannot be changed after creation."""
        path = Path.from_edge(Edge(from_id=1, to_id=2))

        with pytest.raises(ValidationError):
            path.length = 100

    def test_path_str(self):
        """Test the display format."""
        path = Path.from_edge(Edge(from_id=1, to_id=2)).extend(Edge(from_id=2, to_id=3))
        assert str(path) == "Path: From 1 To 3 Length = 2 via 1 -> 2 -> 3"
