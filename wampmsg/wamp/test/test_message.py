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

import pytest

from wampmsg.wamp import message
from wampmsg.wamp.exception import FieldTypeMismatch, MalformedFrame, UnexpectedMessageType
from wampmsg.wamp.role import Role


## one populated instance per message kind
SAMPLES = [
   message.Hello("com.myapp.realm1", {'roles': {'publisher': {}, 'subscriber': {}}}),
   message.Welcome(9129137332, {'roles': {'broker': {}}}),
   message.Abort({'message': "The realm does not exist."}, "wamp.error.no_such_realm"),
   message.Challenge("ticket", {}),
   message.Authenticate("secret!!!", {}),
   message.Goodbye({}, "wamp.close.close_realm"),
   message.Error(48, 7814135, {}, "com.myapp.error.object_write_protected", args = ["Object is write protected."], kwargs = {'severity': 3}),
   message.Publish(239714735, {'acknowledge': True}, "com.myapp.mytopic1", args = ["Hello, world!"]),
   message.Published(239714735, 4429313566),
   message.Subscribe(713845233, {'match': 'prefix'}, "com.myapp.topic1"),
   message.Subscribed(713845233, 5512315355),
   message.Unsubscribe(85346237, 5512315355),
   message.Unsubscribed(85346237),
   message.Event(5512315355, 4429313566, {}, args = [], kwargs = {'color': "orange", 'sizes': [23, 42, 7]}),
   message.Call(7814135, {'timeout': 1000}, "com.myapp.echo", args = ["Hello, world!"]),
   message.Cancel(7814135, {'mode': message.Cancel.KILL}),
   message.Result(7814135, {'progress': True}, args = [30]),
   message.Register(25349185, {}, "com.myapp.myprocedure1"),
   message.Registered(25349185, 2103333224),
   message.Unregister(788923562, 2103333224),
   message.Unregistered(788923562),
   message.Invocation(6131533, 9823526, {'caller': 3335656}, args = ["johnny"], kwargs = {'firstname': "John"}),
   message.Interrupt(6131533, {'mode': message.Interrupt.ABORT}),
   message.Yield(6131533, {}),
]


def _sample_id(msg):
   return msg.__class__.__name__



class TestMessageModel:

   def test_samples_cover_all_kinds(self):
      assert set([m.__class__ for m in SAMPLES]) == set(message.MESSAGE_CLASSES)

   def test_codes_are_unique(self):
      codes = [message.code_for(klass) for klass in message.MESSAGE_CLASSES]
      assert len(codes) == len(set(codes))

   @pytest.mark.parametrize('klass', message.MESSAGE_CLASSES, ids = lambda k: k.__name__)
   def test_kind_for_inverts_code_for(self, klass):
      assert message.kind_for(message.code_for(klass)) is klass

   def test_code_for_instance(self):
      assert message.code_for(message.Unsubscribed(1)) == 35

   def test_basic_profile_codes(self):
      assert message.code_for(message.Hello) == 1
      assert message.code_for(message.Welcome) == 2
      assert message.code_for(message.Abort) == 3
      assert message.code_for(message.Goodbye) == 6
      assert message.code_for(message.Error) == 8
      assert message.code_for(message.Publish) == 16
      assert message.code_for(message.Event) == 36
      assert message.code_for(message.Call) == 48
      assert message.code_for(message.Result) == 50
      assert message.code_for(message.Yield) == 70

   @pytest.mark.parametrize('code', [0, 7, 9999, -1, "1", None, True])
   def test_kind_for_unknown(self, code):
      assert message.kind_for(code) is None

   @pytest.mark.parametrize('klass', message.MESSAGE_CLASSES, ids = lambda k: k.__name__)
   def test_optional_slots_are_trailing(self, klass):
      schema = message.field_schema(klass)
      required = [f[2] for f in schema]
      assert required == sorted(required, reverse = True)
      assert len(schema) > 0

   def test_field_schema(self):
      assert message.field_schema(message.Hello) == (('realm', 'uri', True), ('details', 'dict', True))


class TestParse:

   @pytest.mark.parametrize('msg', SAMPLES, ids = _sample_id)
   def test_parse_marshal_roundtrip(self, msg):
      assert msg.__class__.parse(msg.marshal()) == msg

   def test_hello_parse(self):
      msg = message.Hello.parse([1, "some.realm", {'roles': {'publisher': {}}}])
      assert msg.realm == "some.realm"
      assert msg.details == {'roles': {'publisher': {}}}
      assert msg.roles == ['publisher']

   def test_hello_numeric_realm(self):
      with pytest.raises(FieldTypeMismatch) as exc:
         message.Hello.parse([1, 12345, {}])
      assert exc.value.index == 1
      assert exc.value.expected == 'uri'
      assert exc.value.field == 'realm'

   def test_missing_required_slot(self):
      with pytest.raises(FieldTypeMismatch) as exc:
         message.Subscribe.parse([32, 713845233, {}])
      assert exc.value.index == 3
      assert exc.value.field == 'topic'

   def test_superfluous_slot(self):
      with pytest.raises(FieldTypeMismatch) as exc:
         message.Unsubscribed.parse([35, 85346237, {}])
      assert exc.value.index == 2
      assert exc.value.expected is None

   def test_string_id_not_coerced(self):
      with pytest.raises(FieldTypeMismatch) as exc:
         message.Published.parse([17, "239714735", 4429313566])
      assert exc.value.expected == 'id'

   @pytest.mark.parametrize('value', [-1, 2**53 + 1, 1.0, True])
   def test_invalid_id(self, value):
      with pytest.raises(FieldTypeMismatch):
         message.Registered.parse([65, value, 1])

   def test_details_must_be_dict(self):
      with pytest.raises(FieldTypeMismatch) as exc:
         message.Welcome.parse([2, 9129137332, []])
      assert exc.value.index == 2
      assert exc.value.expected == 'dict'

   def test_empty_uri(self):
      with pytest.raises(FieldTypeMismatch):
         message.Goodbye.parse([6, {}, ""])

   def test_args_must_be_list(self):
      with pytest.raises(FieldTypeMismatch) as exc:
         message.Call.parse([48, 1, {}, "com.myapp.echo", {'a': 1}])
      assert exc.value.index == 4
      assert exc.value.field == 'args'

   def test_null_args_is_absent(self):
      msg = message.Result.parse([50, 1, {}, None])
      assert msg.args is None
      assert msg.marshal() == [50, 1, {}]

   def test_error_request_type_range(self):
      with pytest.raises(FieldTypeMismatch) as exc:
         message.Error.parse([8, 256, 1, {}, "wamp.error.runtime_error"])
      assert exc.value.expected == 'code'

   def test_wrong_message_type(self):
      with pytest.raises(UnexpectedMessageType) as exc:
         message.Hello.parse([2, 9129137332, {}])
      assert exc.value.message_type == 2

   def test_not_a_list(self):
      with pytest.raises(MalformedFrame):
         message.Hello.parse({'realm': "some.realm"})


class TestMessage:

   def test_constructor_validates(self):
      with pytest.raises(FieldTypeMismatch):
         message.Subscribe(1, {}, 42)
      with pytest.raises(FieldTypeMismatch):
         message.Welcome(None, {})

   def test_immutable(self):
      msg = message.Unsubscribed(1)
      with pytest.raises(AttributeError):
         msg.request = 2
      with pytest.raises(AttributeError):
         del msg.request
      assert msg.request == 1

   def test_kwargs_imply_args(self):
      msg = message.Yield(1, {}, kwargs = {'a': 1})
      assert msg.args == []
      assert msg.marshal() == [70, 1, {}, [], {'a': 1}]

   def test_empty_args_are_kept(self):
      assert message.Yield(1, {}, args = []).marshal() == [70, 1, {}, []]

   def test_equality(self):
      assert message.Published(1, 2) == message.Published(1, 2)
      assert message.Published(1, 2) != message.Published(1, 3)
      assert message.Unsubscribed(1) != message.Unregistered(1)

   def test_profiles(self):
      assert message.Call(1, {}, "com.myapp.echo").is_basic()
      assert not message.Call(1, {}, "com.myapp.echo").is_advanced()
      for msg in SAMPLES:
         advanced = msg.__class__ in (message.Challenge, message.Authenticate, message.Cancel, message.Interrupt)
         assert msg.is_advanced() == advanced

   def test_str(self):
      assert str(message.Published(1, 2)) == "WAMP PUBLISHED Message (request = 1, publication = 2)"


class TestHello:

   def test_create(self):
      msg = message.Hello.create("some.realm.uri", [Role.CALLEE, Role.CALLER, Role.PUBLISHER, Role.SUBSCRIBER])
      assert msg.details == {'roles': {'callee': {}, 'caller': {}, 'publisher': {}, 'subscriber': {}}}
      assert sorted(msg.roles) == ['callee', 'caller', 'publisher', 'subscriber']

   def test_create_authmethods(self):
      msg = message.Hello.create("some.realm.uri", [Role.CALLER], authmethods = ["ticket"])
      assert msg.details == {'roles': {'caller': {}}, 'authmethods': ["ticket"]}

   def test_create_invalid_role(self):
      with pytest.raises(ValueError):
         message.Hello.create("some.realm.uri", ["janitor"])
