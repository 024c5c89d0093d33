"""
Schema Tests
============

Construction, equality, string form, dict conversion and type descriptions
of the generated records and enumerations.
"""

import json

import pytest

from idl_records.schemas import (
    TYPE_REGISTRY,
    CdrSerializable,
    Circle,
    InnerStruct,
    Point,
    Rectangle,
    ShapeType,
    StatusCode,
    TypeKind,
    lookup_type,
)


def test_status_code_values():
    """StatusCode codes match the fixed table."""
    assert StatusCode.OK.value == 0
    assert StatusCode.ERROR.value == 1
    assert StatusCode.WARNING.value == 2
    assert [member.name for member in StatusCode] == ['OK', 'ERROR', 'WARNING']


def test_shape_type_values():
    """ShapeType codes match the fixed table and are stable."""
    table = {'CIRCLE': 0, 'RECTANGLE': 1, 'TRIANGLE': 2}
    for _ in range(3):
        assert {member.name: member.value for member in ShapeType} == table
    assert int(ShapeType.TRIANGLE) == 2


def test_point_accessors():
    """Point returns exactly the coordinates it was built with."""
    for x, y in [(0, 0), (-5, 7), (2 ** 31 - 1, -(2 ** 31)), (123456789, 1)]:
        point = Point(x, y)
        assert point.x == x
        assert point.y == y


def test_point_is_immutable():
    point = Point(1, 2)
    with pytest.raises(AttributeError):
        point.x = 5


def test_point_str():
    assert str(Point(x=3, y=-4)) == "Point[x=3, y=-4]"


def test_inner_struct_str_accepts_anything():
    """No constraints on id or name."""
    assert str(InnerStruct(id=-1, name="")) == "InnerStruct[id=-1, name=]"
    assert str(InnerStruct(7, "alpha")) == "InnerStruct[id=7, name=alpha]"


def test_rectangle_str_example():
    rect = Rectangle(id=1, top_left=Point(0, 0), bottom_right=Point(10, 10), label="box")
    assert str(rect) == (
        "Rectangle[id=1, top_left=Point[x=0, y=0], "
        "bottom_right=Point[x=10, y=10], label=box]"
    )


def test_rectangle_str_keeps_corner_order():
    """top_left is rendered before bottom_right, even when 'inverted'."""
    top_left = Point(50, 60)
    bottom_right = Point(-1, -2)
    text = str(Rectangle(9, top_left, bottom_right, "inverted"))

    assert str(top_left) in text
    assert str(bottom_right) in text
    assert text.index(str(top_left)) < text.index(str(bottom_right))


def test_circle_str():
    circle = Circle(id=2, center=Point(5, 5), radius=3, color="red", points=[1, 2.5])
    assert str(circle) == (
        "Circle[id=2, center=Point[x=5, y=5], radius=3.0, color=red, "
        "points=[1.0, 2.5]]"
    )


def test_circle_str_lists_points_in_order_with_duplicates():
    points = [3.5, 1.0, 3.5, -2.25, 0.0]
    text = str(Circle(1, Point(0, 0), 1.0, "blue", points))
    assert text.endswith("points=[3.5, 1.0, 3.5, -2.25, 0.0]]")


def test_circle_empty_points():
    circle = Circle(1, Point(0, 0), 0.0, "none")
    assert circle.points == ()
    assert circle.point_count == 0
    assert str(circle).endswith("points=[]]")


def test_circle_accepts_negative_radius():
    """No geometric validation."""
    assert Circle(1, Point(0, 0), -4.5, "x", []).radius == -4.5


def test_circle_owns_points():
    """Mutating the caller's list does not affect the circle."""
    points = [1.0, 2.0]
    circle = Circle(1, Point(0, 0), 1.0, "red", points)
    points.append(3.0)

    assert circle.points == (1.0, 2.0)
    assert isinstance(circle.points, tuple)


def test_rectangle_has_no_geometric_validation():
    rect = Rectangle(1, Point(10, 10), Point(0, 0), "")
    assert rect.top_left == Point(10, 10)


def test_structural_equality():
    """Identical fields compare equal; changing any single field does not."""
    base = {
        Point: dict(x=1, y=2),
        InnerStruct: dict(id=1, name="a"),
        Rectangle: dict(id=1, top_left=Point(0, 0), bottom_right=Point(1, 1), label="r"),
        Circle: dict(id=1, center=Point(0, 0), radius=1.0, color="c", points=(1.0, 2.0)),
    }
    changed = {
        'x': 9, 'y': 9, 'id': 9, 'name': "b", 'label': "s",
        'top_left': Point(5, 5), 'bottom_right': Point(6, 6),
        'center': Point(3, 3), 'radius': 2.0, 'color': "d", 'points': (2.0, 1.0),
    }

    for cls, fields in base.items():
        assert cls(**fields) == cls(**fields)
        assert hash(cls(**fields)) == hash(cls(**fields))
        for name in fields:
            other = dict(fields, **{name: changed[name]})
            assert cls(**fields) != cls(**other), f"{cls.__name__}.{name}"


def test_circle_points_list_and_tuple_compare_equal():
    assert Circle(1, Point(0, 0), 1, "c", [1, 2]) == Circle(1, Point(0, 0), 1.0, "c", (1.0, 2.0))


def test_dict_conversion_through_json():
    """to_dict output survives JSON and rebuilds an equal record."""
    records = [
        Point(3, 4),
        InnerStruct(5, "inner"),
        Rectangle(1, Point(0, 0), Point(10, 10), "box"),
        Circle(2, Point(5, 5), 3.5, "red", [1.0, 2.5, 1.0]),
    ]
    for record in records:
        data = json.loads(json.dumps(record.to_dict()))
        assert type(record).from_dict(data) == record


def test_rectangle_to_dict_nests_points():
    rect = Rectangle(1, Point(0, 0), Point(10, 10), "box")
    assert rect.to_dict() == {
        'id': 1,
        'top_left': {'x': 0, 'y': 0},
        'bottom_right': {'x': 10, 'y': 10},
        'label': 'box',
    }


def test_circle_from_dict_defaults_points():
    circle = Circle.from_dict({'id': 1, 'center': {'x': 0, 'y': 0}, 'radius': 2, 'color': 'g'})
    assert circle.points == ()


def test_from_dict_missing_field():
    with pytest.raises(ValueError, match="Missing required Point field"):
        Point.from_dict({'x': 1})
    with pytest.raises(ValueError, match="Missing required Rectangle field"):
        Rectangle.from_dict({'id': 1, 'top_left': {'x': 0, 'y': 0}})


def test_from_dict_invalid_value():
    with pytest.raises(ValueError, match="Invalid Circle data"):
        Circle.from_dict({'id': 1, 'center': {'x': 0, 'y': 0}, 'radius': 'wide', 'color': 'g'})
    with pytest.raises(ValueError, match="Invalid Point data"):
        Point.from_dict({'x': None, 'y': 1})


def test_describe_struct():
    descriptor = Circle.describe_type()

    assert descriptor.name == "Circle"
    assert descriptor.scoped_name == "Shapes::Circle"
    assert descriptor.module == "Shapes"
    assert descriptor.kind == TypeKind.STRUCT
    assert descriptor.member_names == ('id', 'center', 'radius', 'color', 'points')
    assert descriptor.get_member('center').type_name == "Shapes::Point"
    assert descriptor.get_member('points').element_kind == TypeKind.FLOAT64
    assert descriptor.get_member('missing') is None


def test_describe_enum():
    descriptor = StatusCode.describe_type()

    assert descriptor.scoped_name == "CommonEnums::StatusCode"
    assert descriptor.kind == TypeKind.ENUM
    assert descriptor.enumerators == ('OK', 'ERROR', 'WARNING')
    assert descriptor.members == ()
    assert ShapeType.describe_type().to_dict()['enumerators'] == ['CIRCLE', 'RECTANGLE', 'TRIANGLE']


def test_descriptor_to_dict():
    data = Rectangle.describe_type().to_dict()

    assert data['scoped_name'] == "Shapes::Rectangle"
    assert data['members'][1] == {'name': 'top_left', 'kind': 'STRUCT', 'type_name': 'Shapes::Point'}
    assert json.loads(json.dumps(data)) == data


def test_registry_and_lookup():
    assert set(TYPE_REGISTRY) == {
        "CommonEnums::StatusCode",
        "CommonStructs::InnerStruct",
        "Shapes::ShapeType",
        "Shapes::Point",
        "Shapes::Rectangle",
        "Shapes::Circle",
    }
    assert lookup_type("Shapes::Circle") is Circle
    with pytest.raises(KeyError, match="Unknown type"):
        lookup_type("Shapes::Triangle")


def test_records_satisfy_serializable_protocol():
    for record in (Point(0, 0), InnerStruct(0, ""), Rectangle(0, Point(0, 0), Point(0, 0), "")):
        assert isinstance(record, CdrSerializable)
    assert not isinstance(object(), CdrSerializable)
