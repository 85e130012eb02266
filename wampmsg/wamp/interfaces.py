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

__all__ = ['IMessage',
           'IObjectSerializer',
           'ISerializer']


from zope.interface import Interface, Attribute



class IMessage(Interface):
   """
   A WAMP message.
   """

   MESSAGE_TYPE = Attribute("""WAMP message type code.""")

   FIELDS = Attribute("""Ordered schema of the message slots following the type code, as tuples `(name, shape, required)`.""")

   ADVANCED = Attribute("""Flag indicating the message kind belongs to the WAMP advanced profile.""")


   def parse(wmsg):
      """
      Verifies and parses an unserialized raw message into an actual WAMP message instance.

      :param wmsg: The unserialized raw message.
      :type wmsg: list

      :returns obj -- An instance of this class.
      """


   def marshal():
      """
      Marshal this object into a raw message for subsequent serialization to bytes.

      :returns list -- The serialized raw message.
      """


   def serialize(serializer):
      """
      Serialize this object into a wire level bytestring representation.

      :param serializer: The wire level serializer to use.
      :type serializer: An instance that implements :class:`wampmsg.wamp.interfaces.ISerializer`
      """


   def is_basic():
      """
      Check if this message belongs to the WAMP basic profile.

      :returns bool -- `True` for basic profile messages.
      """


   def is_advanced():
      """
      Check if this message belongs to the WAMP advanced profile.

      :returns bool -- `True` for advanced profile messages.
      """


   def __eq__(other):
      """
      Message equality. This does an attribute-wise comparison (shallow).

      :param other: The other message to compare with.
      :type other: obj

      :returns bool -- `True` iff the messages are equal.
      """


   def __ne__(other):
      """
      Message inequality (just the negate of message equality).

      :param other: The other message to compare with.
      :type other: obj

      :returns bool -- `True` iff the messages are not equal.
      """


   def __str__():
      """
      Get a string representation of this message for diagnostics.

      :returns str -- The string representation.
      """



class IObjectSerializer(Interface):
   """
   Raw Python object serialization and unserialization. Object serializers are
   used by classes implementing WAMP serializers, that is instances of
   :class:`wampmsg.wamp.interfaces.ISerializer`.
   """

   BINARY = Attribute("""Flag to indicate if serializer requires a binary clean
      transport or if UTF8 transparency is sufficient.""")


   def serialize(obj):
      """
      Serialize an object to a byte string.

      :param obj: Object to serialize.
      :type obj: Any serializable type.

      :returns bytes -- Serialized byte string.
      """


   def unserialize(bytes):
      """
      Unserialize an object from a byte string.

      :param bytes: Object to serialize.
      :type bytes: Any serializable type.

      :returns obj -- Any type of object.
      """



class ISerializer(Interface):
   """
   WAMP message serialization and unserialization.
   """

   SERIALIZER_ID = Attribute("""The WAMP serialization format ID.""")


   def serialize(message):
      """
      Serializes a WAMP message to bytes to be sent to a transport.

      :param message: An instance that implements :class:`wampmsg.wamp.interfaces.IMessage`
      :type message: obj

      :returns tuple -- A pair `(bytes, isBinary)`.
      """


   def unserialize(bytes, isBinary):
      """
      Unserializes bytes from a transport and parses a WAMP message.

      :param bytes: Byte string from wire.
      :type bytes: bytes

      :returns obj -- An instance that implements :class:`wampmsg.wamp.interfaces.IMessage`.
      """
