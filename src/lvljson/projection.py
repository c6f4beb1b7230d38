"""Project a decoded world record onto JSON writer calls."""

from .schema import FileDoor, enum_name, enum_number
from .writer import JSONWriter

# Tile size in pixels; world dimensions are stored in tiles
SCALE = 8

ENEMY_PREFIX = "ENEMY_"

_ONE_WAY = enum_number(FileDoor, "type", "ONE_WAY")
_DOOR_OPEN = enum_number(FileDoor, "state", "DOOR_OPEN")


def enemy_type_label(name: str) -> str:
    """Turn an enemy enum name into display text.

    Examples:
        >>> enemy_type_label("ENEMY_FIRE_IMP")
        'fire imp'
    """
    return name.replace(ENEMY_PREFIX, "").replace("_", " ").lower()


def _write_doors(world, json: JSONWriter) -> None:
    for door in world.door:
        json.begin_object()
        json.key("class").value("wall")
        json.key("start").value(door.start_x, door.start_y)
        json.key("end").value(door.end_x, door.end_y)
        json.key("oneway").value(door.type == _ONE_WAY)
        json.key("open").value(door.state == _DOOR_OPEN)
        json.key("color").value(door.color)
        json.end()


def _write_cogs(world, json: JSONWriter) -> None:
    for cog in world.cog:
        json.begin_object()
        json.key("class").value("cog")
        json.key("pos").value(cog.cog_x, cog.cog_y)
        json.end()


def _write_buttons(world, json: JSONWriter) -> None:
    for button in world.button:
        json.begin_object()
        json.key("class").value("button")
        json.key("type").value(button.behavior)
        json.key("pos").value(button.position_x, button.position_y)
        json.key("walls").begin_array()
        for index in button.door_index:
            json.value(index)
        json.end()
        json.key("color").value(button.color)
        json.end()


def _write_signs(world, json: JSONWriter) -> None:
    for sign in world.sign:
        json.begin_object()
        json.key("class").value("sign")
        json.key("pos").value(sign.sign_x, sign.sign_y)
        json.key("text").value(sign.text)
        json.end()


def _write_enemies(world, json: JSONWriter) -> None:
    for enemy in world.enemy:
        json.begin_object()
        json.key("class").value("enemy")
        json.key("type").value(enemy_type_label(enum_name(enemy, "type")))
        json.key("pos").value(enemy.center_x, enemy.center_y)
        json.key("color").value(enemy.color)
        json.key("angle").value(enemy.angle)
        json.end()


def project_world(world, json: JSONWriter) -> None:
    """Write every field of ``world`` into the root object of ``json``.

    Entities are grouped by kind: walls, cogs, buttons, signs, then enemies.
    The caller still owns the writer and closes it.

    Args:
        world: Decoded ``FileWorld`` message
        json: Writer positioned in its root object
    """
    json.key("unique_id").value(world.unique_id)
    json.key("width").value(world.width * SCALE)
    json.key("height").value(world.height * SCALE)
    json.key("start").value(world.players_start_x, world.players_start_y)
    json.key("end").value(world.players_end_x, world.players_end_y)

    json.key("entities").begin_array()
    _write_doors(world, json)
    _write_cogs(world, json)
    _write_buttons(world, json)
    _write_signs(world, json)
    _write_enemies(world, json)
    json.end()


__all__ = ["ENEMY_PREFIX", "SCALE", "enemy_type_label", "project_world"]
