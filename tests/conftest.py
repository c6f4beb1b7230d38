"""Pytest configuration and shared fixtures."""

import io

import pytest
from click.testing import CliRunner

from lvljson.cli import cli
from lvljson.schema import FileDoor, FileEnemy, FileWorld, enum_number
from lvljson.writer import JSONWriter


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args.

    Usage:
        result = invoke(["level.lvl"])
        result = invoke(["--pack", "a.lvl", "b.lvl"])
    """

    def _invoke(args):
        return cli_runner.invoke(cli, args)

    return _invoke


@pytest.fixture
def emit():
    """Run a build function against a fresh writer and return the text.

    Usage:
        text = emit(lambda w: w.key("a").value(1), pack=True)
    """

    def _emit(build, pack=False):
        sink = io.StringIO()
        with JSONWriter(sink, pack=pack) as writer:
            build(writer)
        return sink.getvalue()

    return _emit


def make_world():
    """Build a world holding one entity of every kind."""
    world = FileWorld(
        unique_id="level-1",
        width=10,
        height=6,
        players_start_x=3,
        players_start_y=-2,
        players_end_x=70,
        players_end_y=40,
    )
    world.door.add(
        start_x=0,
        start_y=0,
        end_x=8,
        end_y=0,
        type=enum_number(FileDoor, "type", "ONE_WAY"),
        state=enum_number(FileDoor, "state", "DOOR_OPEN"),
        color=2,
    )
    world.door.add(start_x=8, start_y=0, end_x=8, end_y=8, color=3)
    world.cog.add(cog_x=5, cog_y=6)
    world.button.add(
        behavior=1, position_x=1, position_y=2, door_index=[0, 1], color=4
    )
    world.sign.add(sign_x=9, sign_y=9, text='Say "hi" \\ bye')
    world.enemy.add(
        type=enum_number(FileEnemy, "type", "ENEMY_FIRE_IMP"),
        center_x=12,
        center_y=-4,
        color=1,
        angle=1.5,
    )
    return world


@pytest.fixture
def world():
    """Provide a populated FileWorld message."""
    return make_world()


@pytest.fixture
def level_file(tmp_path, world):
    """Provide path to a serialized level file built from ``world``."""
    path = tmp_path / "level1.lvl"
    path.write_bytes(world.SerializeToString())
    return path


@pytest.fixture
def corrupt_file(tmp_path):
    """Provide path to a level file whose record is truncated."""
    path = tmp_path / "broken.lvl"
    path.write_bytes(b"\x0a\x05ab")
    return path
