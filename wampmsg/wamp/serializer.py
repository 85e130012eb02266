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

__all__ = ['decode',
           'encode',
           'decode_text',
           'encode_text',
           'JsonObjectSerializer',
           'Serializer',
           'WampJsonSerializer']


import json
import logging

from zope.interface import implementer

from wampmsg.wamp import message
from wampmsg.wamp.exception import MalformedFrame, \
                                   InvalidId, \
                                   ExtensionMessage, \
                                   ProtocolError, \
                                   JsonError
from wampmsg.wamp.interfaces import IObjectSerializer, ISerializer


log = logging.getLogger(__name__)



def decode(raw_msg):
   """
   Verify and dispatch an unserialized raw message to the message class
   for its type code.

   :param raw_msg: The unserialized raw message, eg `[1, "some.realm", {...}]`.
   :type raw_msg: list

   :returns obj -- An instance of one of :data:`wampmsg.wamp.message.MESSAGE_CLASSES`.

   :raises MalformedFrame: `raw_msg` is not a list, or is empty.
   :raises InvalidId: the message type is not an integer in the accepted range.
   :raises ExtensionMessage: the message type is not modelled here.
   :raises FieldTypeMismatch: a message slot is missing, superfluous or of wrong type.
   """
   if type(raw_msg) != list:
      raise MalformedFrame("invalid type {} for WAMP message".format(type(raw_msg)))

   if len(raw_msg) == 0:
      raise MalformedFrame("missing message type in WAMP message")

   message_type = raw_msg[0]

   ## bool is an int subclass, but not a type code
   if type(message_type) != int:
      raise InvalidId("invalid type {} for WAMP message type".format(type(message_type)), message_type)

   if message_type < 0 or message_type > message.MAX_MESSAGE_TYPE:
      raise InvalidId("invalid value {} for WAMP message type".format(message_type), message_type)

   Klass = message.kind_for(message_type)

   if Klass is None:
      raise ExtensionMessage(message_type)

   msg = Klass.parse(raw_msg)

   log.debug("decoded %s", msg)

   return msg



def encode(msg):
   """
   Marshal a message into its canonical raw form `[TYPE, field1, field2, ...]`.

   The field values of the message are placed into the raw message as-is
   (no copy), so the message should not be used afterwards if the raw
   message is going to be modified.

   :param msg: The message to encode.
   :type msg: An instance that implements :class:`wampmsg.wamp.interfaces.IMessage`

   :returns list -- The raw message.
   """
   raw_msg = msg.marshal()

   log.debug("encoded %s", msg)

   return raw_msg



def decode_text(text):
   """
   Parse JSON text and decode the WAMP message it contains.

   :param text: A serialized WAMP message, eg `'[1, "some.realm", {...}]'`.
   :type text: str or bytes

   :returns obj -- The decoded message.

   :raises JsonError: the JSON layer failed to produce a value.
   """
   return decode(_json_loads(text))



def encode_text(msg):
   """
   Encode a WAMP message and serialize it to JSON text.

   :returns str -- The serialized WAMP message.
   """
   return _json_dumps(encode(msg))



def _json_loads(data):
   try:
      if isinstance(data, (bytes, bytearray)):
         data = data.decode('utf8')
      return json.loads(data)
   except ValueError as e:
      ## covers UnicodeDecodeError and JSONDecodeError
      raise JsonError("invalid serialization of WAMP message ({})".format(e)) from e



def _json_dumps(obj):
   return json.dumps(obj, separators = (',', ':'), ensure_ascii = False)



@implementer(IObjectSerializer)
class JsonObjectSerializer:

   BINARY = False


   def serialize(self, obj):
      """
      Implements :func:`wampmsg.wamp.interfaces.IObjectSerializer.serialize`
      """
      return _json_dumps(obj).encode('utf8')


   def unserialize(self, bytes):
      """
      Implements :func:`wampmsg.wamp.interfaces.IObjectSerializer.unserialize`
      """
      return _json_loads(bytes)



@implementer(ISerializer)
class Serializer:
   """
   Base class for WAMP serializers. A WAMP serializer is the core glue between
   parsed WAMP message objects and the bytes on wire (the transport).
   """

   def __init__(self, serializer):
      """
      Constructor.

      :param serializer: An object serializer to use for WAMP wire-level serialization.
      :type serializer: An object that implements :class:`wampmsg.wamp.interfaces.IObjectSerializer`.
      """
      self._serializer = serializer


   def serialize(self, msg):
      """
      Implements :func:`wampmsg.wamp.interfaces.ISerializer.serialize`
      """
      return msg.serialize(self._serializer), self._serializer.BINARY


   def unserialize(self, bytes, isBinary = None):
      """
      Implements :func:`wampmsg.wamp.interfaces.ISerializer.unserialize`
      """
      if isBinary is not None and isBinary != self._serializer.BINARY:
         raise ProtocolError("invalid serialization of WAMP message (binary {}, but expected {})".format(isBinary, self._serializer.BINARY))

      return decode(self._serializer.unserialize(bytes))



class WampJsonSerializer(Serializer):

   SERIALIZER_ID = "json"


   def __init__(self):
      """
      Ctor.
      """
      Serializer.__init__(self, JsonObjectSerializer())
