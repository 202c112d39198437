"""Tests for the in-process Message adapter."""

import pytest

from cloudlink.domain.entities.port import Port
from cloudlink.domain.exceptions import BodyTypeError, HeaderTypeError
from cloudlink.domain.ports.message_port import MessagePort
from cloudlink.infrastructure.message import Message


class TestMessageHeaders:
    def test_implements_message_port(self):
        assert isinstance(Message(), MessagePort)

    def test_missing_distinguished_from_empty(self):
        msg = Message(headers={"name": ""})
        assert msg.has_header("name")
        assert not msg.has_header("ID")
        assert msg.header("name").unwrap() == ""
        assert msg.header("ID").unwrap() is None

    def test_typed_read(self):
        msg = Message(headers={"ID": "abc"})
        assert msg.header("ID", str).value == "abc"

    def test_type_mismatch_is_failure_not_exception(self):
        msg = Message(headers={"ID": 7})
        result = msg.header("ID", str)
        assert not result.ok
        assert isinstance(result.error, HeaderTypeError)

    def test_headers_are_read_only(self):
        msg = Message(headers={"name": "a"})
        with pytest.raises(TypeError):
            msg.headers["name"] = "b"

    def test_headers_copied_from_input(self):
        source = {"name": "a"}
        msg = Message(headers=source)
        source["name"] = "b"
        assert msg.headers["name"] == "a"


class TestMessageBody:
    def test_body_as_match(self):
        port = Port(id="p")
        assert Message(body=port).body_as(Port).unwrap() is port

    def test_body_as_absent(self):
        result = Message().body_as(Port)
        assert isinstance(result.error, BodyTypeError)
        assert str(result.error) == "body must be a Port, got absent"

    def test_body_as_mismatch(self):
        result = Message(body="text").body_as(Port)
        assert str(result.error) == "body must be a Port, got str"

    def test_set_body_and_fault(self):
        msg = Message()
        msg.set_body("x")
        msg.set_fault(True)
        assert msg.body() == "x"
        assert msg.fault is True

    def test_message_id_generated(self):
        assert Message().message_id != Message().message_id
