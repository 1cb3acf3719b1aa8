"""Tests for RouteService and the default container wiring."""

import math
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from pathengine.adapters.cache import InMemoryCache, NullCache
from pathengine.adapters.graph import CSVGraphRepository, DijkstraRouteSolver
from pathengine.config import AppConfig, CacheConfig, GraphConfig
from pathengine.container import Container, get_container
from pathengine.domain.errors import UnknownVertexError
from pathengine.graph import GraphModel
from pathengine.ports.cache import CachePort
from pathengine.ports.graph import GraphRepositoryPort, RouteSolverPort
from pathengine.services import RouteService

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


@dataclass
class StaticRepository:
    """Repository serving a prebuilt graph and counting loads."""

    graph: GraphModel
    loads: int = 0
    clears: int = 0

    def load(self) -> GraphModel:
        self.loads += 1
        return self.graph

    def list_vertices(self):
        return self.graph.vertices()

    def clear_cache(self) -> None:
        self.clears += 1


@dataclass
class CountingSolver:
    """Wraps DijkstraRouteSolver and records every call."""

    inner: DijkstraRouteSolver = field(default_factory=DijkstraRouteSolver)
    calls: list = field(default_factory=list)

    def solve(self, graph, start, end, cancel=None):
        self.calls.append(("route", start, end))
        return self.inner.solve(graph, start, end, cancel=cancel)

    def solve_all(self, graph, start, cancel=None):
        self.calls.append(("routes", start))
        return self.inner.solve_all(graph, start, cancel=cancel)


@dataclass
class BlockingSolver:
    """Holds every solve until ``release`` is set."""

    inner: DijkstraRouteSolver = field(default_factory=DijkstraRouteSolver)
    entered: threading.Event = field(default_factory=threading.Event)
    release: threading.Event = field(default_factory=threading.Event)

    def solve(self, graph, start, end, cancel=None):
        self.entered.set()
        self.release.wait(timeout=5)
        return self.inner.solve(graph, start, end, cancel=cancel)

    def solve_all(self, graph, start, cancel=None):
        self.entered.set()
        self.release.wait(timeout=5)
        return self.inner.solve_all(graph, start, cancel=cancel)


class TestRouteService:
    @pytest.fixture
    def solver(self):
        return CountingSolver()

    @pytest.fixture
    def service(self, weighted_graph, solver):
        return RouteService(
            graph_repository=StaticRepository(weighted_graph),
            route_solver=solver,
            cache=InMemoryCache(name="test"),
        )

    def test_shortest_route(self, service):
        result = service.shortest_route("A", "E")

        assert result.distance == 6
        assert result.path == ("A", "C", "B", "E")

    def test_routes_from(self, service):
        result = service.routes_from("A")

        assert result.distances["E"] == 6
        assert result.paths["D"] == ("A", "C", "D")

    def test_results_are_cached(self, service, solver):
        first = service.shortest_route("A", "E")
        second = service.shortest_route("A", "E")
        service.routes_from("A")
        service.routes_from("A")

        assert second is first
        assert solver.calls == [("route", "A", "E"), ("routes", "A")]

    def test_reload_drops_cached_results(self, service, solver):
        service.shortest_route("A", "E")

        service.reload()
        service.shortest_route("A", "E")

        assert service.graph_repository.clears == 1
        assert solver.calls == [("route", "A", "E"), ("route", "A", "E")]

    def test_no_cache_always_solves(self, weighted_graph, solver):
        service = RouteService(StaticRepository(weighted_graph), solver)

        service.shortest_route("A", "E")
        service.shortest_route("A", "E")

        assert len(solver.calls) == 2

    def test_null_cache_always_solves(self, weighted_graph, solver):
        service = RouteService(StaticRepository(weighted_graph), solver, NullCache())

        service.routes_from("A")
        service.routes_from("A")

        assert len(solver.calls) == 2

    def test_unreachable_route_is_a_result(self, disconnected_graph):
        service = RouteService(StaticRepository(disconnected_graph), DijkstraRouteSolver())

        result = service.shortest_route("A", "D")

        assert math.isinf(result.distance)
        assert result.path == ()

    def test_unknown_vertex_is_not_cached(self, service, solver):
        for _ in range(2):
            with pytest.raises(UnknownVertexError):
                service.shortest_route("A", "Z")

        assert solver.calls == []
        assert service.cache.size() == 0

    @pytest.mark.parametrize("vertex", [["A"], {"A": 1}])
    def test_unhashable_vertex_raises_unknown_vertex_error(self, service, solver, vertex):
        with pytest.raises(UnknownVertexError):
            service.shortest_route(vertex, "E")
        with pytest.raises(UnknownVertexError):
            service.routes_from(vertex)

        assert solver.calls == []

    def test_result_finished_after_reload_is_not_served(self):
        before = GraphModel.build(["A", "B"], [("A", "B", 10)])
        after = GraphModel.build(["A", "B"], [("A", "B", 1)])
        repository = StaticRepository(before)
        solver = BlockingSolver()
        service = RouteService(repository, solver, InMemoryCache(name="test"))

        with ThreadPoolExecutor(max_workers=1) as pool:
            pending = pool.submit(service.shortest_route, "A", "B")
            assert solver.entered.wait(timeout=5)
            repository.graph = after
            service.reload()
            solver.release.set()
            assert pending.result(timeout=5).distance == 10

        assert service.shortest_route("A", "B").distance == 1


class TestContainer:
    def test_default_container_wires_route_service(self):
        config = AppConfig(graph=GraphConfig(data_dir=DATA_DIR))
        container = Container.create_default(config)

        service = container.resolve(RouteService)

        assert isinstance(service.graph_repository, CSVGraphRepository)
        assert isinstance(service.route_solver, DijkstraRouteSolver)
        assert isinstance(service.cache, InMemoryCache)
        assert service.shortest_route("Home", "Work").distance == 8

    def test_route_service_is_a_singleton(self):
        container = Container.create_default(AppConfig(graph=GraphConfig(data_dir=DATA_DIR)))

        assert container.resolve(RouteService) is container.resolve(RouteService)

    def test_disabled_cache_resolves_null_cache(self):
        config = AppConfig(cache=CacheConfig(enabled=False))

        cache = Container.create_default(config).resolve(CachePort)

        assert isinstance(cache, NullCache)

    def test_register_overrides_binding(self, weighted_graph):
        container = Container.create_default(AppConfig())
        container.register(GraphRepositoryPort, lambda: StaticRepository(weighted_graph))

        service = container.resolve(RouteService)

        assert service.shortest_route("A", "E").distance == 6

    def test_non_singleton_registration_builds_new_instances(self):
        container = Container()
        container.register(RouteSolverPort, DijkstraRouteSolver, singleton=False)

        assert container.resolve(RouteSolverPort) is not container.resolve(RouteSolverPort)

    def test_unregistered_type_raises_key_error(self):
        with pytest.raises(KeyError):
            Container().resolve(RouteService)

    def test_get_container_uses_environment(self, monkeypatch):
        monkeypatch.setenv("PATHENGINE_GRAPH_DATA_DIR", str(DATA_DIR))

        service = get_container().resolve(RouteService)

        assert service.routes_from("Home").distances["School"] == 17
        assert get_container() is get_container()
