"""Tests for level descriptor parsing and encoding."""

import pytest

from config import LEVELS
from engine.levels import InvalidLevelError, encode_level, load_levels, parse_level
from models.level import Block, Item


class TestParseLevel:
    """Tests for parse_level()."""

    def test_first_shipped_level(self):
        level = parse_level("5:3:1:GGGGGSSSSSGGGGG:nnnnnnnnnnnnnnn")
        assert level.width == 5
        assert level.height == 3
        assert level.roads == (1,)
        assert level.blocks[0] == Block.GRASS
        assert level.blocks[5] == Block.STONE
        assert len(level.blocks) == 15
        assert all(item == Item.NONE for item in level.items)

    def test_multiple_roads(self):
        level = parse_level("5:6:2,3,4:GGGGGWWSWWSSSSSSSSSSSSSSSGGGGG")
        assert level.roads == (2, 3, 4)

    def test_items_field_is_optional(self):
        level = parse_level("5:3:1:GGGGGSSSSSGGGGG")
        assert level.items is None

    def test_item_symbols(self):
        level = parse_level("4:2:0:SSSSGGGG:bgohkrsn")
        assert level.items == (
            Item.BLUE_GEM, Item.GREEN_GEM, Item.ORANGE_GEM, Item.HEART,
            Item.KEY, Item.ROCK, Item.STAR, Item.NONE,
        )

    def test_empty_roads(self):
        level = parse_level("2:2::GGGG")
        assert level.roads == ()

    def test_descriptor_is_immutable(self):
        level = parse_level("5:3:1:GGGGGSSSSSGGGGG")
        with pytest.raises(Exception):
            level.width = 7

    def test_every_shipped_level_parses(self):
        levels = load_levels()
        assert len(levels) == len(LEVELS) == 10
        for level in levels:
            assert len(level.blocks) == level.width * level.height
            assert len(level.items) == level.width * level.height
            assert all(0 <= road < level.height for road in level.roads)


class TestInvalidLevels:
    """parse_level() refuses descriptors that cannot describe a board."""

    def test_block_length_mismatch(self):
        with pytest.raises(InvalidLevelError, match="blocks must have 15 symbols"):
            parse_level("5:3:1:GGGGGSSSSSGGGG")

    def test_item_length_mismatch(self):
        with pytest.raises(InvalidLevelError, match="items must have 15 symbols"):
            parse_level("5:3:1:GGGGGSSSSSGGGGG:nnnn")

    def test_non_numeric_width(self):
        with pytest.raises(InvalidLevelError, match="width"):
            parse_level("five:3:1:GGGGGSSSSSGGGGG")

    def test_non_numeric_road(self):
        with pytest.raises(InvalidLevelError, match="road"):
            parse_level("5:3:1,x:GGGGGSSSSSGGGGG")

    def test_zero_size(self):
        with pytest.raises(InvalidLevelError, match="positive"):
            parse_level("0:3:1:")

    def test_road_outside_board(self):
        with pytest.raises(InvalidLevelError, match="outside"):
            parse_level("5:3:3:GGGGGSSSSSGGGGG")

    def test_unknown_block_symbol(self):
        with pytest.raises(InvalidLevelError, match="Unknown blocks symbol: 'X'"):
            parse_level("5:3:1:GGGGGSSXSSGGGGG")

    def test_unknown_item_symbol(self):
        with pytest.raises(InvalidLevelError, match="Unknown items symbol"):
            parse_level("5:3:1:GGGGGSSSSSGGGGG:nnnnnnnnnnnnnnz")

    def test_wrong_field_count(self):
        with pytest.raises(InvalidLevelError, match="fields"):
            parse_level("5:3:GGGGGSSSSSGGGGG")
        with pytest.raises(InvalidLevelError, match="fields"):
            parse_level("5:3:1:GGGGGSSSSSGGGGG:nnnnnnnnnnnnnnn:extra")

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_level("garbage")


class TestEncodeLevel:
    """Tests for encode_level()."""

    def test_shipped_levels_encode_back_unchanged(self):
        for descriptor in LEVELS:
            level = parse_level(descriptor)
            encoded = encode_level(
                level.width, level.height, level.roads, level.blocks, level.items
            )
            assert encoded == descriptor

    def test_without_items(self):
        level = parse_level("2:2::GWSG")
        assert encode_level(level.width, level.height, level.roads, level.blocks) == "2:2::GWSG"
