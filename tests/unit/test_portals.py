from grid_board.components import Position
from grid_board.portals import (
    PortalRegistry,
    clear_portals,
    link_portal,
    lookup_portal,
    unlink_portal,
)
from tests.test_utils import make_portals


def test_link_and_lookup() -> None:
    registry = link_portal(PortalRegistry(), Position(2, 2), Position(5, 5))
    assert lookup_portal(registry, Position(2, 2)) == Position(5, 5)


def test_link_is_directed() -> None:
    registry = make_portals({(2, 2): (5, 5)})
    assert lookup_portal(registry, Position(5, 5)) is None


def test_relink_overwrites() -> None:
    registry = make_portals({(2, 2): (5, 5)})
    registry = link_portal(registry, Position(2, 2), Position(1, 1))
    assert lookup_portal(registry, Position(2, 2)) == Position(1, 1)
    assert len(registry.connections) == 1


def test_many_sources_may_share_a_destination() -> None:
    registry = make_portals({(0, 0): (4, 4), (1, 1): (4, 4)})
    assert lookup_portal(registry, Position(0, 0)) == Position(4, 4)
    assert lookup_portal(registry, Position(1, 1)) == Position(4, 4)


def test_lookup_missing_returns_none() -> None:
    assert lookup_portal(PortalRegistry(), Position(0, 0)) is None


def test_unlink() -> None:
    registry = make_portals({(0, 0): (1, 1), (2, 2): (3, 3)})
    registry = unlink_portal(registry, Position(0, 0))
    assert lookup_portal(registry, Position(0, 0)) is None
    assert lookup_portal(registry, Position(2, 2)) == Position(3, 3)


def test_unlink_missing_is_noop() -> None:
    registry = make_portals({(0, 0): (1, 1)})
    assert unlink_portal(registry, Position(7, 7)) == registry


def test_clear() -> None:
    registry = make_portals({(0, 0): (1, 1), (2, 2): (3, 3)})
    assert len(clear_portals(registry).connections) == 0
    # Input registry untouched
    assert len(registry.connections) == 2
