"""Tests for projecting world records onto the JSON writer."""

import io
import json

import pytest

from lvljson.projection import SCALE, enemy_type_label, project_world
from lvljson.schema import FileWorld, decode_world
from lvljson.writer import JSONWriter


def project(world, pack=False):
    sink = io.StringIO()
    with JSONWriter(sink, pack=pack) as writer:
        project_world(world, writer)
    return sink.getvalue()


class TestEnemyTypeLabel:
    """Test enum name normalization."""

    @pytest.mark.parametrize(
        "name, label",
        [
            ("ENEMY_FIRE_IMP", "fire imp"),
            ("ENEMY_BOMBER", "bomber"),
            ("ENEMY_HEAT_SEEKING_ROCKET", "heat seeking rocket"),
            ("", ""),
        ],
    )
    def test_labels(self, name, label):
        assert enemy_type_label(name) == label


class TestProjectWorld:
    """Test the JSON document produced for a world."""

    def test_header_fields(self, world):
        data = json.loads(project(world))
        assert data["unique_id"] == "level-1"
        assert data["width"] == 80
        assert data["height"] == 6 * SCALE
        assert data["start"] == [3, -2]
        assert data["end"] == [70, 40]

    def test_key_order(self, world):
        data = json.loads(project(world))
        assert list(data) == ["unique_id", "width", "height", "start", "end", "entities"]

    def test_entity_order_by_kind(self, world):
        entities = json.loads(project(world))["entities"]
        assert [e["class"] for e in entities] == [
            "wall",
            "wall",
            "cog",
            "button",
            "sign",
            "enemy",
        ]

    def test_walls(self, world):
        walls = json.loads(project(world))["entities"][:2]
        assert walls[0] == {
            "class": "wall",
            "start": [0, 0],
            "end": [8, 0],
            "oneway": True,
            "open": True,
            "color": 2,
        }
        assert walls[1]["oneway"] is False
        assert walls[1]["open"] is False

    def test_cog(self, world):
        cog = json.loads(project(world))["entities"][2]
        assert cog == {"class": "cog", "pos": [5, 6]}

    def test_button(self, world):
        button = json.loads(project(world))["entities"][3]
        assert button == {
            "class": "button",
            "type": 1,
            "pos": [1, 2],
            "walls": [0, 1],
            "color": 4,
        }
        assert list(button) == ["class", "type", "pos", "walls", "color"]

    def test_sign_text_escaped(self, world):
        sign = json.loads(project(world))["entities"][4]
        assert sign["text"] == 'Say "hi" \\ bye'

    def test_enemy(self, world):
        enemy = json.loads(project(world))["entities"][5]
        assert enemy == {
            "class": "enemy",
            "type": "fire imp",
            "pos": [12, -4],
            "color": 1,
            "angle": 1.5,
        }

    def test_packed_and_pretty_agree(self, world):
        assert json.loads(project(world, pack=True)) == json.loads(project(world))

    def test_round_trip_through_bytes(self, world):
        decoded = decode_world(world.SerializeToString())
        assert project(decoded, pack=True) == project(world, pack=True)

    @pytest.mark.parametrize("pack", [False, True])
    def test_empty_world(self, pack):
        data = json.loads(project(FileWorld(width=10), pack=pack))
        assert data["entities"] == []
        assert data["width"] == 80
        arrays = [key for key, value in data.items() if isinstance(value, list)]
        # start/end pairs are inline values; entities is the only array frame
        assert sorted(arrays) == ["end", "entities", "start"]

    def test_empty_world_packed_text(self):
        assert project(FileWorld(), pack=True) == (
            '{"unique_id":"","width":0,"height":0,'
            '"start":[0,0],"end":[0,0],"entities":[]}'
        )

    def test_button_without_walls(self):
        world = FileWorld()
        world.button.add(behavior=0)
        button = json.loads(project(world))["entities"][0]
        assert button["walls"] == []

    def test_unknown_enemy_type_reads_as_default(self):
        # enemy (field 12) holding type (field 1) = 99
        world = decode_world(b"\x62\x02\x08\x63")
        enemy = json.loads(project(world))["entities"][0]
        assert enemy["type"] == "bomber"
