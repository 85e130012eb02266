###############################################################################
##
##  Copyright (C) 2013-2014 Tavendo GmbH
##
##  Licensed under the Apache License, Version 2.0 (the "License");
##  you may not use this file except in compliance with the License.
##  You may obtain a copy of the License at
##
##      http://www.apache.org/licenses/LICENSE-2.0
##
##  Unless required by applicable law or agreed to in writing, software
##  distributed under the License is distributed on an "AS IS" BASIS,
##  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
##  See the License for the specific language governing permissions and
##  limitations under the License.
##
###############################################################################

import json

import pytest

from wampmsg.wamp import message
from wampmsg.wamp.exception import ProtocolError, \
                                   MalformedFrame, \
                                   InvalidId, \
                                   ExtensionMessage, \
                                   FieldTypeMismatch, \
                                   SerializationError, \
                                   JsonError
from wampmsg.wamp.interfaces import ISerializer, IObjectSerializer, IMessage
from wampmsg.wamp.serializer import decode, \
                                    encode, \
                                    decode_text, \
                                    encode_text, \
                                    JsonObjectSerializer, \
                                    WampJsonSerializer

from wampmsg.wamp.test.test_message import SAMPLES, _sample_id



class TestDecode:

   @pytest.mark.parametrize('msg', SAMPLES, ids = _sample_id)
   def test_roundtrip(self, msg):
      assert decode(encode(msg)) == msg

   @pytest.mark.parametrize('msg', SAMPLES, ids = _sample_id)
   def test_encode_layout(self, msg):
      raw = encode(msg)
      assert raw[0] == msg.MESSAGE_TYPE
      assert raw[1:] == [getattr(msg, f[0]) for f in msg.FIELDS][:len(raw) - 1]

   def test_encode_does_not_copy(self):
      details = {'roles': {'caller': {}}}
      raw = encode(message.Hello("some.realm", details))
      assert raw[2] is details

   def test_hello(self):
      msg = decode([1, "some.realm", {'roles': {'publisher': {}, 'subscriber': {}, 'caller': {}, 'callee': {}}}])
      assert isinstance(msg, message.Hello)
      assert IMessage.providedBy(msg)
      assert msg.realm == "some.realm"

   @pytest.mark.parametrize('raw', [[], {}, "[1]", None, 1, (1, "some.realm", {})])
   def test_malformed_frame(self, raw):
      with pytest.raises(MalformedFrame):
         decode(raw)

   @pytest.mark.parametrize('raw', [["not-an-id", "some.realm", {}],
                                    [-1],
                                    [256, 1],
                                    [1.0, "some.realm", {}],
                                    [True, "some.realm", {}],
                                    [None]])
   def test_invalid_id(self, raw):
      with pytest.raises(InvalidId):
         decode(raw)

   @pytest.mark.parametrize('raw', [[9999, "anything"], [7], [255, {}]])
   def test_extension_message(self, raw):
      with pytest.raises(ExtensionMessage) as exc:
         decode(raw)
      assert exc.value.message_type == raw[0]
      assert not isinstance(exc.value, MalformedFrame)

   def test_field_type_mismatch(self):
      with pytest.raises(FieldTypeMismatch) as exc:
         decode([1, 12345])
      assert exc.value.index is not None
      assert exc.value.expected is not None

   def test_errors_are_protocol_errors(self):
      for raw in ([], ["x"], [9999], [1, 12345]):
         with pytest.raises(ProtocolError):
            decode(raw)


class TestText:

   def test_end_to_end(self):
      msg = decode_text('[1, "some.realm", {"roles": {"publisher": {}}}]')
      assert isinstance(msg, message.Hello)
      assert msg.realm == "some.realm"
      raw = json.loads(encode_text(msg))
      assert raw[0] == 1
      assert raw[1] == "some.realm"

   def test_bytes(self):
      msg = decode_text(b'[17, 239714735, 4429313566]')
      assert msg == message.Published(239714735, 4429313566)

   @pytest.mark.parametrize('text', ['[1, "some.realm", {', 'hello', b'[1, "\xff"]', ''])
   def test_json_error(self, text):
      with pytest.raises(JsonError) as exc:
         decode_text(text)
      assert isinstance(exc.value, SerializationError)
      assert exc.value.__cause__ is not None

   def test_unicode(self):
      msg = message.Publish(1, {}, "com.myapp.topic1", args = ["Grüße"])
      assert decode_text(encode_text(msg)) == msg


class TestSerializer:

   def test_interfaces(self):
      serializer = WampJsonSerializer()
      assert ISerializer.providedBy(serializer)
      assert IObjectSerializer.providedBy(JsonObjectSerializer())
      assert serializer.SERIALIZER_ID == "json"

   @pytest.mark.parametrize('msg', SAMPLES, ids = _sample_id)
   def test_roundtrip(self, msg):
      serializer = WampJsonSerializer()
      payload, isBinary = serializer.serialize(msg)
      assert type(payload) == bytes
      assert isBinary is False
      assert serializer.unserialize(payload, isBinary) == msg

   def test_binary_mismatch(self):
      serializer = WampJsonSerializer()
      with pytest.raises(ProtocolError):
         serializer.unserialize(b'[35, 1]', True)

   def test_object_serializer(self):
      serializer = JsonObjectSerializer()
      assert serializer.serialize([35, 1]) == b'[35,1]'
      assert serializer.unserialize(b'[35,1]') == [35, 1]
