#!/usr/bin/env python3
"""
Tests for the Tile data model
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest
from quadtiles.models.tile import Tile, CodecSettings
from quadtiles.exceptions.quadkey_exceptions import InvalidCoordinateError, ValidationError
from quadtiles.services.quadkey_service import QuadKeyService


class TestTile:
    """Test cases for Tile class"""

    def test_get_quadkey(self):
        assert Tile(3, 5, 3).get_quadkey() == "213"
        assert Tile(0, 0, 0).get_quadkey() == ""

    def test_from_quadkey(self):
        assert Tile.from_quadkey("213") == Tile(3, 5, 3)

    def test_get_parent(self):
        tile = Tile(3, 5, 3)
        parent = tile.get_parent()
        assert parent == Tile(1, 2, 2)
        assert parent.get_quadkey() == tile.get_quadkey()[:-1]

    def test_root_has_no_parent(self):
        with pytest.raises(InvalidCoordinateError):
            Tile(0, 0, 0).get_parent()

    def test_get_children(self):
        children = Tile(0, 0, 0).get_children()
        assert [child.get_quadkey() for child in children] == ["0", "1", "2", "3"]
        assert all(child.get_parent() == Tile(0, 0, 0) for child in children)

    def test_children_at_max_zoom(self):
        with pytest.raises(InvalidCoordinateError):
            Tile(0, 0, 32).get_children()
        assert len(Tile(0, 0, 31).get_children()) == 4

    def test_contains(self):
        parent = Tile.from_quadkey("03")
        assert parent.contains(Tile.from_quadkey("032"))
        assert parent.contains(Tile.from_quadkey("0321"))
        assert parent.contains(parent)
        assert not parent.contains(Tile.from_quadkey("022"))
        assert not parent.contains(Tile.from_quadkey("0"))

    def test_to_dict(self):
        assert Tile(3, 5, 3).to_dict() == {'x': 3, 'y': 5, 'z': 3}

    def test_hashable(self):
        assert len({Tile(1, 1, 1), Tile(1, 1, 1), Tile(0, 1, 1)}) == 2


class TestCodecSettings:
    """Test cases for CodecSettings class"""

    def test_defaults(self):
        settings = CodecSettings()
        assert settings.max_zoom == 32
        assert settings.is_strict()

    def test_truncate(self):
        assert not CodecSettings(out_of_range='truncate').is_strict()

    @pytest.mark.parametrize("policy", ["Reject", "strict", "", None])
    def test_unknown_policy_rejected(self, policy):
        """Unknown policies never fall back to truncation"""
        with pytest.raises(ValidationError):
            CodecSettings(out_of_range=policy)

    def test_service_keeps_rejecting_out_of_range(self):
        service = QuadKeyService(CodecSettings())
        with pytest.raises(InvalidCoordinateError):
            service.encode(11, 13, 3)


if __name__ == "__main__":
    pytest.main([__file__])
