"""Tests for building save commands from request bodies."""
from content.commands import Insert, Update, command_from_body
from content.store import FOOTER_LINK_FIELDS, PRODUCT_FIELDS, TOUR_FIELDS


def test_body_without_id_is_insert():
    cmd = command_from_body({"title": "Mug", "image": "/img/mug.png", "link": "https://shop", "position": 2}, PRODUCT_FIELDS)
    assert cmd == Insert(fields={"title": "Mug", "image": "/img/mug.png", "link": "https://shop", "position": 2})


def test_insert_defaults_position_to_zero():
    cmd = command_from_body({"text": "Home", "url": "/"}, FOOTER_LINK_FIELDS)
    assert isinstance(cmd, Insert)
    assert cmd.fields["position"] == 0


def test_falsy_id_is_insert():
    for falsy in (None, 0, ""):
        cmd = command_from_body({"id": falsy, "text": "Home", "url": "/"}, FOOTER_LINK_FIELDS)
        assert isinstance(cmd, Insert)
        assert "id" not in cmd.fields


def test_truthy_id_is_update():
    cmd = command_from_body({"id": 7, "name": "Hạ Long", "price": "2.500.000đ"}, TOUR_FIELDS)
    assert isinstance(cmd, Update)
    assert cmd.id == 7
    assert cmd.fields["name"] == "Hạ Long"
    assert cmd.fields["price"] == "2.500.000đ"


def test_update_keeps_missing_position_as_none():
    """Updates write every field as given; only inserts default position."""
    cmd = command_from_body({"id": 3, "title": "Mug"}, PRODUCT_FIELDS)
    assert isinstance(cmd, Update)
    assert cmd.fields == {"title": "Mug", "image": None, "link": None, "position": None}


def test_unknown_fields_are_dropped():
    cmd = command_from_body({"title": "Mug", "created_by": "admin"}, PRODUCT_FIELDS)
    assert set(cmd.fields) == set(PRODUCT_FIELDS)
