"""Protobuf message types for binary level files.

The world record is described in code with ``descriptor_pb2`` and turned into
message classes at import time, so no generated ``*_pb2`` module is needed.

Layout (proto2, package ``lvljson``):

    FileWorld   unique_id, width, height (tiles), players_start_x/y,
                players_end_x/y, repeated door/cog/button/sign/enemy
    FileDoor    start_x/y, end_x/y, type (DoorType), state (DoorState), color
    FileCog     cog_x, cog_y
    FileButton  behavior (ButtonBehavior), position_x/y,
                repeated door_index, color
    FileSign    sign_x, sign_y, text
    FileEnemy   type (EnemyType), center_x/y, color, angle
"""

from typing import Iterable

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory
from google.protobuf.message import DecodeError, Message

PACKAGE = "lvljson"

_Field = descriptor_pb2.FieldDescriptorProto

ENEMY_TYPES = (
    "ENEMY_BOMBER",
    "ENEMY_BOUNCY_ROCKET",
    "ENEMY_CORROSION_CLOUD",
    "ENEMY_DOOM_MAGNET",
    "ENEMY_FIRE_IMP",
    "ENEMY_GRENADIER",
    "ENEMY_HEAT_SEEKING_ROCKET",
    "ENEMY_JET_STREAM",
    "ENEMY_MULTI_GUN",
    "ENEMY_SHOCK_HAWK",
    "ENEMY_SPIKE_BALL",
    "ENEMY_WALL_CRAWLER",
    "ENEMY_WHEELIGATOR",
)


def _enum(message, name: str, values: Iterable[str]) -> None:
    enum = message.enum_type.add(name=name)
    for number, value in enumerate(values):
        enum.value.add(name=value, number=number)


def _field(message, name, number, kind, type_name=None, repeated=False) -> None:
    field = message.field.add(
        name=name,
        number=number,
        type=kind,
        label=_Field.LABEL_REPEATED if repeated else _Field.LABEL_OPTIONAL,
    )
    if type_name:
        field.type_name = f".{PACKAGE}.{type_name}"


def _coords(message, names, start=1) -> None:
    for offset, name in enumerate(names):
        _field(message, name, start + offset, _Field.TYPE_SINT32)


def _build_file() -> descriptor_pb2.FileDescriptorProto:
    proto = descriptor_pb2.FileDescriptorProto(
        name="lvljson/world.proto", package=PACKAGE, syntax="proto2"
    )

    door = proto.message_type.add(name="FileDoor")
    _enum(door, "DoorType", ["TWO_WAY", "ONE_WAY"])
    _enum(door, "DoorState", ["DOOR_CLOSED", "DOOR_OPEN"])
    _coords(door, ["start_x", "start_y", "end_x", "end_y"])
    _field(door, "type", 5, _Field.TYPE_ENUM, "FileDoor.DoorType")
    _field(door, "state", 6, _Field.TYPE_ENUM, "FileDoor.DoorState")
    _field(door, "color", 7, _Field.TYPE_INT32)

    cog = proto.message_type.add(name="FileCog")
    _coords(cog, ["cog_x", "cog_y"])

    button = proto.message_type.add(name="FileButton")
    _enum(button, "ButtonBehavior", ["TOGGLE", "OPEN", "CLOSE"])
    _field(button, "behavior", 1, _Field.TYPE_ENUM, "FileButton.ButtonBehavior")
    _coords(button, ["position_x", "position_y"], start=2)
    _field(button, "door_index", 4, _Field.TYPE_INT32, repeated=True)
    _field(button, "color", 5, _Field.TYPE_INT32)

    sign = proto.message_type.add(name="FileSign")
    _coords(sign, ["sign_x", "sign_y"])
    _field(sign, "text", 3, _Field.TYPE_STRING)

    enemy = proto.message_type.add(name="FileEnemy")
    _enum(enemy, "EnemyType", ENEMY_TYPES)
    _field(enemy, "type", 1, _Field.TYPE_ENUM, "FileEnemy.EnemyType")
    _coords(enemy, ["center_x", "center_y"], start=2)
    _field(enemy, "color", 4, _Field.TYPE_INT32)
    _field(enemy, "angle", 5, _Field.TYPE_DOUBLE)

    world = proto.message_type.add(name="FileWorld")
    _field(world, "unique_id", 1, _Field.TYPE_STRING)
    _field(world, "width", 2, _Field.TYPE_INT32)
    _field(world, "height", 3, _Field.TYPE_INT32)
    _coords(
        world,
        ["players_start_x", "players_start_y", "players_end_x", "players_end_y"],
        start=4,
    )
    for number, (name, type_name) in enumerate(
        [
            ("door", "FileDoor"),
            ("cog", "FileCog"),
            ("button", "FileButton"),
            ("sign", "FileSign"),
            ("enemy", "FileEnemy"),
        ],
        start=8,
    ):
        _field(world, name, number, _Field.TYPE_MESSAGE, type_name, repeated=True)

    return proto


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_build_file().SerializeToString())


def _message_class(name: str):
    return message_factory.GetMessageClass(
        _pool.FindMessageTypeByName(f"{PACKAGE}.{name}")
    )


FileDoor = _message_class("FileDoor")
FileCog = _message_class("FileCog")
FileButton = _message_class("FileButton")
FileSign = _message_class("FileSign")
FileEnemy = _message_class("FileEnemy")
FileWorld = _message_class("FileWorld")


def decode_world(data: bytes) -> Message:
    """Parse serialized bytes into a ``FileWorld``.

    Proto2 string fields holding invalid UTF-8 come back as ``bytes``; such
    records are rejected here rather than while writing JSON.

    Raises:
        DecodeError: If the bytes are not a valid FileWorld record
    """
    world = FileWorld()
    world.ParseFromString(data)
    texts = [("unique_id", world.unique_id)]
    texts.extend(("sign.text", sign.text) for sign in world.sign)
    for name, text in texts:
        if not isinstance(text, str):
            raise DecodeError(f"Field {name} is not valid UTF-8")
    return world


def enum_name(message: Message, field_name: str) -> str:
    """Return the symbolic name of an enum field's value.

    Enums are closed (proto2): unknown numbers on the wire are kept as
    unknown fields and the field reads back as its default, so every value
    read here has a name.
    """
    field = message.DESCRIPTOR.fields_by_name[field_name]
    return field.enum_type.values_by_number[getattr(message, field_name)].name


def enum_number(message_class, field_name: str, name: str) -> int:
    """Return the number of enum value ``name`` for a message class's field."""
    field = message_class.DESCRIPTOR.fields_by_name[field_name]
    return field.enum_type.values_by_name[name].number


__all__ = [
    "DecodeError",
    "ENEMY_TYPES",
    "FileButton",
    "FileCog",
    "FileDoor",
    "FileEnemy",
    "FileSign",
    "FileWorld",
    "decode_world",
    "enum_name",
    "enum_number",
]
