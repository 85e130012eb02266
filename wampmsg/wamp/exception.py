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

__all__ = ['Error',
           'ProtocolError',
           'MalformedFrame',
           'InvalidId',
           'ExtensionMessage',
           'FieldTypeMismatch',
           'UnexpectedMessageType',
           'SerializationError',
           'JsonError']



class Error(RuntimeError):
   """
   Base class for all exceptions related to WAMP message handling.
   """

   def __init__(self, reason):
      """
      Constructor.

      :param reason: Description of the error.
      :type reason: str
      """
      RuntimeError.__init__(self, reason)
      self.reason = reason



class ProtocolError(Error):
   """
   Exception raised when a raw message violates the WAMP wire format.
   Protocol errors are terminal: the offending message is rejected and
   it is up to the caller what to do about the peer that sent it.
   """



class MalformedFrame(ProtocolError):
   """
   The raw message is not a JSON array, or the array is empty.
   """



class InvalidId(ProtocolError):
   """
   The message type position does not hold a non-negative integer within
   the accepted range.
   """

   def __init__(self, reason, offense = None):
      ProtocolError.__init__(self, reason)
      self.offense = offense



class ExtensionMessage(ProtocolError):
   """
   The message type is well-formed, but does not belong to a message kind
   modelled here. Routers commonly extend the protocol, so this is
   recoverable: the caller may choose to ignore the message.
   """

   def __init__(self, message_type):
      ProtocolError.__init__(self, "unsupported (extension) message type {}".format(message_type))
      self.message_type = message_type



class FieldTypeMismatch(ProtocolError):
   """
   A message slot is missing, superfluous or of the wrong JSON shape.
   """

   def __init__(self, reason, index, expected, field = None):
      """
      Constructor.

      :param reason: Description of the error.
      :type reason: str
      :param index: Position within the raw message array of the offending slot.
      :type index: int
      :param expected: The shape expected at that position (eg `"dict"`), or
                       `None` for a slot that should not be there at all.
      :type expected: str
      :param field: Name of the message field at that position (if any).
      :type field: str
      """
      ProtocolError.__init__(self, reason)
      self.index = index
      self.expected = expected
      self.field = field



class UnexpectedMessageType(ProtocolError):
   """
   A raw message was handed to the parser of a different message kind.
   """

   def __init__(self, reason, message_type):
      ProtocolError.__init__(self, reason)
      self.message_type = message_type



class SerializationError(Error):
   """
   Exception raised when a serializer fails to turn bytes into a raw
   message (or the other way round).
   """



class JsonError(SerializationError):
   """
   The JSON layer failed before a raw message was even produced (eg
   invalid UTF-8 or JSON syntax). The original exception is chained as
   `__cause__`.
   """
