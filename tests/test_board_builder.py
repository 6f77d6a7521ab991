"""Tests for board construction: tile placement, road/settlement dedup, stages."""

import random
from collections import Counter

import pytest

from hexboard.engine.board_builder import BoardBuilder, build_board
from hexboard.models.board import Board, BoardStage
from hexboard.models.hex import VERTEX_EDGES, CubeCoord, EdgeDirection, VertexDirection
from hexboard.models.road import Road
from hexboard.models.tile import GameTile, Resource
from hexboard.util.errors import InvariantViolation
from hexboard.util.hex_math import canonical_hash


class TestTilePlacement:
    @pytest.mark.parametrize("radius", [1, 2, 3, 4])
    def test_tile_counts(self, radius):
        board = build_board(radius, seed=1)
        assert len(board.tiles) == 3 * radius ** 2 + 3 * radius + 1
        assert len(board.placeholder_tiles) == 6 * radius
        assert len(board.resource_tiles) == 3 * radius ** 2 - 3 * radius + 1

    def test_keys_match_coordinates(self):
        board = build_board(3, seed=1)
        assert len({t.coord for t in board.tiles}) == len(board.tile_map)
        for key, tile in board.tile_map.items():
            assert key == tile.coord.key

    def test_outer_ring_is_placeholder(self):
        board = build_board(3, seed=1)
        for tile in board.tiles:
            on_rim = max(abs(tile.coord.q), abs(tile.coord.r), abs(tile.coord.s)) == 3
            assert tile.is_placeholder == on_rim

    def test_resource_data_in_range(self):
        board = build_board(5, seed=2)
        for tile in board.resource_tiles:
            assert isinstance(tile.resource, Resource)
            assert 2 <= tile.number <= 12

    def test_draws_cover_every_outcome(self):
        board = build_board(10, seed=3)
        numbers = Counter(t.number for t in board.resource_tiles)
        resources = Counter(t.resource for t in board.resource_tiles)
        assert set(numbers) == set(range(2, 13))
        assert set(resources) == set(Resource)

    def test_seed_is_reproducible(self):
        a = build_board(3, seed=42)
        b = build_board(3, seed=42)
        assert [(t.resource, t.number) for t in a.tiles] == [(t.resource, t.number) for t in b.tiles]

    def test_initial_size(self):
        board = build_board(2, size=33.0, seed=1)
        assert all(t.size == 33.0 for t in board.tiles)

    def test_invalid_radius(self):
        with pytest.raises(ValueError):
            BoardBuilder(0)

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            BoardBuilder(2, size=0)


class TestRoads:
    @pytest.mark.parametrize("radius, expected", [(1, 0), (2, 12), (3, 42)])
    def test_road_count(self, radius, expected):
        assert len(build_board(radius, seed=1).roads) == expected

    def test_roads_join_resource_neighbors(self):
        board = build_board(3, seed=1)
        for road in board.roads:
            a, b = road.tiles
            assert a.is_resource and b.is_resource
            assert a.is_neighbor(b)

    def test_each_edge_once(self):
        board = build_board(3, seed=1)
        edges = {frozenset(t.coord for t in road.tiles) for road in board.roads}
        assert len(edges) == len(board.roads)
        for key, road in board.road_map.items():
            assert key == canonical_hash(t.coord for t in road.tiles)

    def test_roads_reference_board_tiles(self):
        board = build_board(2, seed=1)
        for road in board.roads:
            for tile in road.tiles:
                assert board.tile_map[tile.coord.key] is tile


class TestSettlements:
    @pytest.mark.parametrize("radius, expected", [(1, 6), (2, 24), (3, 54)])
    def test_settlement_count(self, radius, expected):
        assert len(build_board(radius, seed=1).settlements) == expected

    def test_each_corner_once(self):
        board = build_board(3, seed=1)
        corners = {frozenset(t.coord for t in s.tiles) for s in board.settlements}
        assert len(corners) == len(board.settlements)

    def test_every_resource_corner_present(self):
        board = build_board(3, seed=1)
        for tile in board.resource_tiles:
            for direction in VertexDirection:
                key = canonical_hash(tile.vertex_coordinates(direction))
                assert key in board.settlement_map


class TestStages:
    def test_stages_advance_in_order(self):
        builder = BoardBuilder(2, rng=random.Random(0))
        assert builder.stage is BoardStage.UNINITIALIZED
        builder.place_tiles()
        assert builder.stage is BoardStage.TILES_PLACED
        builder.build_roads()
        assert builder.stage is BoardStage.ROADS_BUILT
        builder.build_settlements()
        assert builder.stage is BoardStage.SETTLEMENTS_BUILT
        board = builder.finalize()
        assert board.stage is BoardStage.READY
        assert board.is_ready

    def test_out_of_order_step_fails(self):
        builder = BoardBuilder(2)
        with pytest.raises(RuntimeError):
            builder.build_roads()

    def test_ready_board_is_frozen(self):
        board = build_board(2, seed=1)
        with pytest.raises(RuntimeError):
            board.add_tile(GameTile.placeholder(CubeCoord(5, -5, 0), 10))
        with pytest.raises(RuntimeError):
            board.add_road(board.roads[0])

    def test_broken_vertex_table_aborts_build(self, monkeypatch):
        monkeypatch.setitem(
            VERTEX_EDGES, VertexDirection.NORTH, (EdgeDirection.EAST, EdgeDirection.WEST)
        )
        with pytest.raises(InvariantViolation):
            BoardBuilder(2, rng=random.Random(0)).build()


class TestBoard:
    def test_duplicate_inserts_are_dropped(self):
        board = Board(radius=1)
        a = GameTile.resource_tile(CubeCoord(0, 0, 0), 10, Resource.ORE, 3)
        b = GameTile.resource_tile(CubeCoord(1, 0, -1), 10, Resource.ORE, 4)
        assert board.add_tile(a)
        assert board.add_tile(b)
        assert not board.add_tile(GameTile.placeholder(CubeCoord(0, 0, 0), 10))
        assert board.add_road(Road((a, b)))
        assert not board.add_road(Road((b, a)))
        assert len(board.roads) == 1

    def test_lookup_miss_is_none(self):
        board = build_board(2, seed=1)
        assert board.get_tile(CubeCoord(3, -3, 0)) is None
        assert board.resolve((CubeCoord(2, -2, 0), CubeCoord(3, -3, 0))) is None

    def test_resize_keeps_topology(self):
        board = build_board(3, seed=1)
        roads, settlements = len(board.roads), len(board.settlements)
        board.resize(12.5)
        assert all(t.size == 12.5 for t in board.tiles)
        assert (len(board.roads), len(board.settlements)) == (roads, settlements)

    def test_resize_rejects_non_positive(self):
        board = build_board(2, seed=1)
        with pytest.raises(ValueError):
            board.resize(0)

    def test_validate_detects_missing_tile(self):
        builder = BoardBuilder(2, rng=random.Random(0))
        builder.place_tiles()
        del builder.board.tile_map[CubeCoord(0, 0, 0).key]
        with pytest.raises(InvariantViolation):
            builder.board.validate()

    def test_list_views_are_fresh(self):
        board = build_board(2, seed=1)
        board.tiles.clear()
        assert len(board.tiles) == 19
