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

__all__ = ['Message',
           'Hello',
           'Welcome',
           'Abort',
           'Challenge',
           'Authenticate',
           'Goodbye',
           'Error',
           'Publish',
           'Published',
           'Subscribe',
           'Subscribed',
           'Unsubscribe',
           'Unsubscribed',
           'Event',
           'Call',
           'Cancel',
           'Result',
           'Register',
           'Registered',
           'Unregister',
           'Unregistered',
           'Invocation',
           'Interrupt',
           'Yield',
           'MESSAGE_CLASSES',
           'code_for',
           'kind_for',
           'field_schema']


from zope.interface import implementer

from wampmsg import util
from wampmsg.wamp.exception import MalformedFrame, FieldTypeMismatch, UnexpectedMessageType
from wampmsg.wamp.interfaces import IMessage
from wampmsg.wamp.role import ROLES


MAX_MESSAGE_TYPE = 255
"""
Largest message type code accepted. Type codes are restricted to the
unsigned 8-bit range.
"""

MAX_ID = 9007199254740992 # 2**53
"""
Largest session, request, subscription, registration or publication ID.
"""

## field shapes used in message schemas
##
SHAPE_CODE = 'code'
SHAPE_ID = 'id'
SHAPE_URI = 'uri'
SHAPE_STRING = 'string'
SHAPE_DICT = 'dict'
SHAPE_LIST = 'list'



def _is_int(value):
   ## bool is a subclass of int, but never a valid WAMP integer
   return type(value) == int



def check_or_raise_code(value, index, field, message):
   if not _is_int(value):
      raise FieldTypeMismatch("{}: invalid type {} for message type".format(message, type(value)), index, SHAPE_CODE, field)
   if value < 0 or value > MAX_MESSAGE_TYPE:
      raise FieldTypeMismatch("{}: invalid value {} for message type".format(message, value), index, SHAPE_CODE, field)
   return value



def check_or_raise_id(value, index, field, message):
   if not _is_int(value):
      raise FieldTypeMismatch("{}: invalid type {} for ID".format(message, type(value)), index, SHAPE_ID, field)
   if value < 0 or value > MAX_ID:
      raise FieldTypeMismatch("{}: invalid value {} for ID".format(message, value), index, SHAPE_ID, field)
   return value



def check_or_raise_uri(value, index, field, message):
   if type(value) != str:
      raise FieldTypeMismatch("{}: invalid type {} for URI".format(message, type(value)), index, SHAPE_URI, field)
   if len(value) == 0:
      raise FieldTypeMismatch("{}: invalid value '{}' for URI".format(message, value), index, SHAPE_URI, field)
   return value



def check_or_raise_string(value, index, field, message):
   if type(value) != str:
      raise FieldTypeMismatch("{}: invalid type {} for string".format(message, type(value)), index, SHAPE_STRING, field)
   return value



def check_or_raise_extra(value, index, field, message):
   if type(value) != dict:
      raise FieldTypeMismatch("{}: invalid type {} for dict".format(message, type(value)), index, SHAPE_DICT, field)
   for k in value.keys():
      if type(k) != str:
         raise FieldTypeMismatch("{}: invalid type {} for key '{}'".format(message, type(k), k), index, SHAPE_DICT, field)
   return value



def check_or_raise_list(value, index, field, message):
   if type(value) != list:
      raise FieldTypeMismatch("{}: invalid type {} for list".format(message, type(value)), index, SHAPE_LIST, field)
   return value



_SHAPE_CHECKERS = {
   SHAPE_CODE: check_or_raise_code,
   SHAPE_ID: check_or_raise_id,
   SHAPE_URI: check_or_raise_uri,
   SHAPE_STRING: check_or_raise_string,
   SHAPE_DICT: check_or_raise_extra,
   SHAPE_LIST: check_or_raise_list
}



class Message(util.EqualityMixin):
   """
   WAMP message base class. This is not supposed to be instantiated.

   Concrete message classes describe their wire layout in `FIELDS`: an ordered
   tuple of `(name, shape, required)` for every slot following the message type
   code. Optional slots only ever come last. Instances are validated against this
   schema on construction and are immutable afterwards.
   """

   MESSAGE_TYPE = None
   """
   The WAMP message code for this type of message.
   """

   FIELDS = ()

   ADVANCED = False


   def __init__(self, **fields):
      """
      Base constructor. Validates and stores the message fields.
      """
      ## positional args are implied by keyword args
      ##
      if fields.get('kwargs') is not None and fields.get('args') is None:
         fields['args'] = []

      name = self.__class__.__name__.upper()

      for index, (field, shape, required) in enumerate(self.FIELDS, 1):
         value = fields.pop(field, None)
         if value is None:
            if required:
               raise FieldTypeMismatch("missing mandatory '{}' in {}".format(field, name), index, shape, field)
         else:
            _SHAPE_CHECKERS[shape](value, index, field, "'{}' in {}".format(field, name))
         object.__setattr__(self, field, value)

      if fields:
         raise TypeError("unexpected fields {} for {}".format(sorted(fields), name))


   def __setattr__(self, name, value):
      raise AttributeError("WAMP messages are immutable (cannot set '{}')".format(name))


   def __delattr__(self, name):
      raise AttributeError("WAMP messages are immutable (cannot delete '{}')".format(name))


   @classmethod
   def parse(klass, wmsg):
      """
      Verifies and parses an unserialized raw message into an actual WAMP message instance.

      :param wmsg: The unserialized raw message.
      :type wmsg: list

      :returns obj -- An instance of this class.
      """
      if type(wmsg) != list or len(wmsg) == 0:
         raise MalformedFrame("invalid raw message: expected non-empty list, got {}".format(type(wmsg)))

      name = klass.__name__.upper()

      if not _is_int(wmsg[0]) or wmsg[0] != klass.MESSAGE_TYPE:
         raise UnexpectedMessageType("invalid message type {} for {}".format(wmsg[0], name), wmsg[0])

      required = len([f for f in klass.FIELDS if f[2]])

      if len(wmsg) - 1 < required:
         index = len(wmsg)
         field, shape, _ = klass.FIELDS[index - 1]
         raise FieldTypeMismatch("invalid message length {} for {} (missing '{}')".format(len(wmsg), name, field), index, shape, field)

      if len(wmsg) - 1 > len(klass.FIELDS):
         raise FieldTypeMismatch("invalid message length {} for {}".format(len(wmsg), name), len(klass.FIELDS) + 1, None)

      fields = {}
      for index, (field, shape, required) in enumerate(klass.FIELDS, 1):
         if index < len(wmsg):
            fields[field] = wmsg[index]

      return klass(**fields)


   def marshal(self):
      """
      Implements :func:`wampmsg.wamp.interfaces.IMessage.marshal`

      Field values are placed into the raw message as they are (not copied).
      """
      wmsg = [self.MESSAGE_TYPE]
      for field, shape, required in self.FIELDS:
         value = getattr(self, field)
         ## optional slots are trailing, and kwargs imply args
         if value is None:
            break
         wmsg.append(value)
      return wmsg


   def serialize(self, serializer):
      """
      Implements :func:`wampmsg.wamp.interfaces.IMessage.serialize`
      """
      return serializer.serialize(self.marshal())


   def is_basic(self):
      """
      Implements :func:`wampmsg.wamp.interfaces.IMessage.is_basic`
      """
      return not self.ADVANCED


   def is_advanced(self):
      """
      Implements :func:`wampmsg.wamp.interfaces.IMessage.is_advanced`
      """
      return self.ADVANCED


   def __repr__(self):
      return str(self)


   def __str__(self):
      """
      Implements :func:`wampmsg.wamp.interfaces.IMessage.__str__`
      """
      fields = ", ".join(["{} = {}".format(field, getattr(self, field)) for field, _, _ in self.FIELDS])
      return "WAMP {} Message ({})".format(self.__class__.__name__.upper(), fields)



@implementer(IMessage)
class Hello(Message):
   """
   A WAMP `HELLO` message.

   Format: `[HELLO, Realm|uri, Details|dict]`
   """

   MESSAGE_TYPE = 1
   """
   The WAMP message code for this type of message.
   """

   FIELDS = (('realm', SHAPE_URI, True),
             ('details', SHAPE_DICT, True))


   def __init__(self, realm, details):
      """
      Message constructor.

      :param realm: The URI of the WAMP realm to join.
      :type realm: str
      :param details: Session details. Announces the roles of the peer under `roles`.
      :type details: dict
      """
      Message.__init__(self, realm = realm, details = details)


   @staticmethod
   def create(realm, roles, authmethods = None):
      """
      Create a `HELLO` message with a default details object announcing
      the given roles (and authentication methods, if any).

      :param realm: The URI of the WAMP realm to join.
      :type realm: str
      :param roles: Roles the peer plays, eg `[Role.CALLER, Role.SUBSCRIBER]`.
      :type roles: list
      :param authmethods: Authentication methods offered, eg `["ticket"]`. These
                          are for the advanced profile, leave at `None` otherwise.
      :type authmethods: list

      :returns obj -- A new `Hello` instance.
      """
      details = {'roles': {}}

      for role in roles:
         if role not in ROLES:
            raise ValueError("invalid role '{}' for HELLO".format(role))
         details['roles'][role] = {}

      if authmethods is not None:
         details['authmethods'] = list(authmethods)

      return Hello(realm, details)


   @property
   def roles(self):
      """
      The role names announced in the details of this message.
      """
      roles = self.details.get('roles', {})
      if type(roles) != dict:
         return []
      return list(roles.keys())



@implementer(IMessage)
class Welcome(Message):
   """
   A WAMP `WELCOME` message.

   Format: `[WELCOME, Session|id, Details|dict]`
   """

   MESSAGE_TYPE = 2
   """
   The WAMP message code for this type of message.
   """

   FIELDS = (('session', SHAPE_ID, True),
             ('details', SHAPE_DICT, True))


   def __init__(self, session, details):
      """
      Message constructor.

      :param session: The WAMP session ID the other peer is assigned.
      :type session: int
      :param details: Session details, eg the roles of the router.
      :type details: dict
      """
      Message.__init__(self, session = session, details = details)



@implementer(IMessage)
class Abort(Message):
   """
   A WAMP `ABORT` message.

   Format: `[ABORT, Details|dict, Reason|uri]`
   """

   MESSAGE_TYPE = 3
   """
   The WAMP message code for this type of message.
   """

   FIELDS = (('details', SHAPE_DICT, True),
             ('reason', SHAPE_URI, True))


   def __init__(self, details, reason):
      """
      Message constructor.

      :param details: Abort details, eg a human readable `message`.
      :type details: dict
      :param reason: WAMP or application URI for the aborting reason.
      :type reason: str
      """
      Message.__init__(self, details = details, reason = reason)



@implementer(IMessage)
class Challenge(Message):
   """
   A WAMP `CHALLENGE` message (advanced profile).

   Format: `[CHALLENGE, AuthMethod|string, Extra|dict]`
   """

   MESSAGE_TYPE = 4
   """
   The WAMP message code for this type of message.
   """

   FIELDS = (('authmethod', SHAPE_STRING, True),
             ('extra', SHAPE_DICT, True))

   ADVANCED = True


   def __init__(self, authmethod, extra):
      Message.__init__(self, authmethod = authmethod, extra = extra)



@implementer(IMessage)
class Authenticate(Message):
   """
   A WAMP `AUTHENTICATE` message (advanced profile).

   Format: `[AUTHENTICATE, Signature|string, Extra|dict]`
   """

   MESSAGE_TYPE = 5
   """
   The WAMP message code for this type of message.
   """

   FIELDS = (('signature', SHAPE_STRING, True),
             ('extra', SHAPE_DICT, True))

   ADVANCED = True


   def __init__(self, signature, extra):
      Message.__init__(self, signature = signature, extra = extra)



@implementer(IMessage)
class Goodbye(Message):
   """
   A WAMP `GOODBYE` message.

   Format: `[GOODBYE, Details|dict, Reason|uri]`
   """

   MESSAGE_TYPE = 6
   """
   The WAMP message code for this type of message.
   """

   FIELDS = (('details', SHAPE_DICT, True),
             ('reason', SHAPE_URI, True))


   def __init__(self, details, reason):
      """
      Message constructor.

      :param details: Closing details, eg a human readable `message`.
      :type details: dict
      :param reason: WAMP or application URI for the closing reason.
      :type reason: str
      """
      Message.__init__(self, details = details, reason = reason)



@implementer(IMessage)
class Error(Message):
   """
   A WAMP `ERROR` message.

   Formats:
     * `[ERROR, REQUEST.Type|int, REQUEST.Request|id, Details|dict, Error|uri]`
     * `[ERROR, REQUEST.Type|int, REQUEST.Request|id, Details|dict, Error|uri, Arguments|list]`
     * `[ERROR, REQUEST.Type|int, REQUEST.Request|id, Details|dict, Error|uri, Arguments|list, ArgumentsKw|dict]`
   """

   MESSAGE_TYPE = 8
   """
   The WAMP message code for this type of message.
   """

   FIELDS = (('request_type', SHAPE_CODE, True),
             ('request', SHAPE_ID, True),
             ('details', SHAPE_DICT, True),
             ('error', SHAPE_URI, True),
             ('args', SHAPE_LIST, False),
             ('kwargs', SHAPE_DICT, False))


   def __init__(self, request_type, request, details, error, args = None, kwargs = None):
      """
      Message constructor.

      :param request_type: The WAMP message type code for the original request.
      :type request_type: int
      :param request: The WAMP request ID of the original request (`Call`, `Subscribe`, ...) this error occured for.
      :type request: int
      :param details: Error details.
      :type details: dict
      :param error: The WAMP or application error URI for the error that occured.
      :type error: str
      :param args: Positional values for application-defined exception.
                   Must be serializable using any serializers in use.
      :type args: list
      :param kwargs: Keyword values for application-defined exception.
                     Must be serializable using any serializers in use.
      :type kwargs: dict
      """
      Message.__init__(self,
                       request_type = request_type,
                       request = request,
                       details = details,
                       error = error,
                       args = args,
                       kwargs = kwargs)



@implementer(IMessage)
class Publish(Message):
   """
   A WAMP `PUBLISH` message.

   Formats:
     * `[PUBLISH, Request|id, Options|dict, Topic|uri]`
     * `[PUBLISH, Request|id, Options|dict, Topic|uri, Arguments|list]`
     * `[PUBLISH, Request|id, Options|dict, Topic|uri, Arguments|list, ArgumentsKw|dict]`
   """

   MESSAGE_TYPE = 16
   """
   The WAMP message code for this type of message.
   """

   FIELDS = (('request', SHAPE_ID, True),
             ('options', SHAPE_DICT, True),
             ('topic', SHAPE_URI, True),
             ('args', SHAPE_LIST, False),
             ('kwargs', SHAPE_DICT, False))


   def __init__(self, request, options, topic, args = None, kwargs = None):
      """
      Message constructor.

      :param request: The WAMP request ID of this request.
      :type request: int
      :param options: Publication options, eg `acknowledge`.
      :type options: dict
      :param topic: The WAMP or application URI of the PubSub topic the event should
                    be published to.
      :type topic: str
      :param args: Positional values for application-defined event payload.
                   Must be serializable using any serializers in use.
      :type args: list
      :param kwargs: Keyword values for application-defined event payload.
                     Must be serializable using any serializers in use.
      :type kwargs: dict
      """
      Message.__init__(self,
                       request = request,
                       options = options,
                       topic = topic,
                       args = args,
                       kwargs = kwargs)



@implementer(IMessage)
class Published(Message):
   """
   A WAMP `PUBLISHED` message.

   Format: `[PUBLISHED, PUBLISH.Request|id, Publication|id]`
   """

   MESSAGE_TYPE = 17
   """
   The WAMP message code for this type of message.
   """

   FIELDS = (('request', SHAPE_ID, True),
             ('publication', SHAPE_ID, True))


   def __init__(self, request, publication):
      """
      Message constructor.

      :param request: The request ID of the original `PUBLISH` request.
      :type request: int
      :param publication: The publication ID for the published event.
      :type publication: int
      """
      Message.__init__(self, request = request, publication = publication)



@implementer(IMessage)
class Subscribe(Message):
   """
   A WAMP `SUBSCRIBE` message.

   Format: `[SUBSCRIBE, Request|id, Options|dict, Topic|uri]`
   """

   MESSAGE_TYPE = 32
   """
   The WAMP message code for this type of message.
   """

   FIELDS = (('request', SHAPE_ID, True),
             ('options', SHAPE_DICT, True),
             ('topic', SHAPE_URI, True))


   def __init__(self, request, options, topic):
      """
      Message constructor.

      :param request: The WAMP request ID of this request.
      :type request: int
      :param options: Subscription options, eg `match`.
      :type options: dict
      :param topic: The WAMP or application URI of the PubSub topic to subscribe to.
      :type topic: str
      """
      Message.__init__(self, request = request, options = options, topic = topic)



@implementer(IMessage)
class Subscribed(Message):
   """
   A WAMP `SUBSCRIBED` message.

   Format: `[SUBSCRIBED, SUBSCRIBE.Request|id, Subscription|id]`
   """

   MESSAGE_TYPE = 33
   """
   The WAMP message code for this type of message.
   """

   FIELDS = (('request', SHAPE_ID, True),
             ('subscription', SHAPE_ID, True))


   def __init__(self, request, subscription):
      """
      Message constructor.

      :param request: The request ID of the original `SUBSCRIBE` request.
      :type request: int
      :param subscription: The subscription ID for the subscribed topic (or topic pattern).
      :type subscription: int
      """
      Message.__init__(self, request = request, subscription = subscription)



@implementer(IMessage)
class Unsubscribe(Message):
   """
   A WAMP `UNSUBSCRIBE` message.

   Format: `[UNSUBSCRIBE, Request|id, SUBSCRIBED.Subscription|id]`
   """

   MESSAGE_TYPE = 34
   """
   The WAMP message code for this type of message.
   """

   FIELDS = (('request', SHAPE_ID, True),
             ('subscription', SHAPE_ID, True))


   def __init__(self, request, subscription):
      """
      Message constructor.

      :param request: The WAMP request ID of this request.
      :type request: int
      :param subscription: The subscription ID for the subscription to unsubscribe from.
      :type subscription: int
      """
      Message.__init__(self, request = request, subscription = subscription)



@implementer(IMessage)
class Unsubscribed(Message):
   """
   A WAMP `UNSUBSCRIBED` message.

   Format: `[UNSUBSCRIBED, UNSUBSCRIBE.Request|id]`
   """

   MESSAGE_TYPE = 35
   """
   The WAMP message code for this type of message.
   """

   FIELDS = (('request', SHAPE_ID, True),)


   def __init__(self, request):
      Message.__init__(self, request = request)



@implementer(IMessage)
class Event(Message):
   """
   A WAMP `EVENT` message.

   Formats:

     * `[EVENT, SUBSCRIBED.Subscription|id, PUBLISHED.Publication|id, Details|dict]`
     * `[EVENT, SUBSCRIBED.Subscription|id, PUBLISHED.Publication|id, Details|dict, PUBLISH.Arguments|list]`
     * `[EVENT, SUBSCRIBED.Subscription|id, PUBLISHED.Publication|id, Details|dict, PUBLISH.Arguments|list, PUBLISH.ArgumentsKw|dict]`
   """

   MESSAGE_TYPE = 36
   """
   The WAMP message code for this type of message.
   """

   FIELDS = (('subscription', SHAPE_ID, True),
             ('publication', SHAPE_ID, True),
             ('details', SHAPE_DICT, True),
             ('args', SHAPE_LIST, False),
             ('kwargs', SHAPE_DICT, False))


   def __init__(self, subscription, publication, details, args = None, kwargs = None):
      """
      Message constructor.

      :param subscription: The subscription ID this event is dispatched under.
      :type subscription: int
      :param publication: The publication ID of the dispatched event.
      :type publication: int
      :param details: Event details, eg the `publisher` session ID if disclosed.
      :type details: dict
      :param args: Positional values for application-defined event payload.
      :type args: list
      :param kwargs: Keyword values for application-defined event payload.
      :type kwargs: dict
      """
      Message.__init__(self,
                       subscription = subscription,
                       publication = publication,
                       details = details,
                       args = args,
                       kwargs = kwargs)



@implementer(IMessage)
class Call(Message):
   """
   A WAMP `CALL` message.

   Formats:
     * `[CALL, Request|id, Options|dict, Procedure|uri]`
     * `[CALL, Request|id, Options|dict, Procedure|uri, Arguments|list]`
     * `[CALL, Request|id, Options|dict, Procedure|uri, Arguments|list, ArgumentsKw|dict]`
   """

   MESSAGE_TYPE = 48
   """
   The WAMP message code for this type of message.
   """

   FIELDS = (('request', SHAPE_ID, True),
             ('options', SHAPE_DICT, True),
             ('procedure', SHAPE_URI, True),
             ('args', SHAPE_LIST, False),
             ('kwargs', SHAPE_DICT, False))


   def __init__(self, request, options, procedure, args = None, kwargs = None):
      """
      Message constructor.

      :param request: The WAMP request ID of this request.
      :type request: int
      :param options: Call options, eg `timeout`.
      :type options: dict
      :param procedure: The WAMP or application URI of the procedure which should be called.
      :type procedure: str
      :param args: Positional values for application-defined call arguments.
                   Must be serializable using any serializers in use.
      :type args: list
      :param kwargs: Keyword values for application-defined call arguments.
                     Must be serializable using any serializers in use.
      :type kwargs: dict
      """
      Message.__init__(self,
                       request = request,
                       options = options,
                       procedure = procedure,
                       args = args,
                       kwargs = kwargs)



@implementer(IMessage)
class Cancel(Message):
   """
   A WAMP `CANCEL` message (advanced profile).

   Format: `[CANCEL, CALL.Request|id, Options|dict]`
   """

   MESSAGE_TYPE = 49
   """
   The WAMP message code for this type of message.
   """

   FIELDS = (('request', SHAPE_ID, True),
             ('options', SHAPE_DICT, True))

   ADVANCED = True

   SKIP = 'skip'
   ABORT = 'abort'
   KILL = 'kill'


   def __init__(self, request, options):
      """
      Message constructor.

      :param request: The WAMP request ID of the original `CALL` to cancel.
      :type request: int
      :param options: Cancel options, eg `mode` (one of `skip`, `abort` or `kill`).
      :type options: dict
      """
      Message.__init__(self, request = request, options = options)



@implementer(IMessage)
class Result(Message):
   """
   A WAMP `RESULT` message.

   Formats:
     * `[RESULT, CALL.Request|id, Details|dict]`
     * `[RESULT, CALL.Request|id, Details|dict, YIELD.Arguments|list]`
     * `[RESULT, CALL.Request|id, Details|dict, YIELD.Arguments|list, YIELD.ArgumentsKw|dict]`
   """

   MESSAGE_TYPE = 50
   """
   The WAMP message code for this type of message.
   """

   FIELDS = (('request', SHAPE_ID, True),
             ('details', SHAPE_DICT, True),
             ('args', SHAPE_LIST, False),
             ('kwargs', SHAPE_DICT, False))


   def __init__(self, request, details, args = None, kwargs = None):
      """
      Message constructor.

      :param request: The request ID of the original `CALL` request.
      :type request: int
      :param details: Result details, eg `progress` for progressive call results.
      :type details: dict
      :param args: Positional values for application-defined call result.
      :type args: list
      :param kwargs: Keyword values for application-defined call result.
      :type kwargs: dict
      """
      Message.__init__(self, request = request, details = details, args = args, kwargs = kwargs)



@implementer(IMessage)
class Register(Message):
   """
   A WAMP `REGISTER` message.

   Format: `[REGISTER, Request|id, Options|dict, Procedure|uri]`
   """

   MESSAGE_TYPE = 64
   """
   The WAMP message code for this type of message.
   """

   FIELDS = (('request', SHAPE_ID, True),
             ('options', SHAPE_DICT, True),
             ('procedure', SHAPE_URI, True))


   def __init__(self, request, options, procedure):
      """
      Message constructor.

      :param request: The WAMP request ID of this request.
      :type request: int
      :param options: Registration options.
      :type options: dict
      :param procedure: The WAMP or application URI of the RPC endpoint provided.
      :type procedure: str
      """
      Message.__init__(self, request = request, options = options, procedure = procedure)



@implementer(IMessage)
class Registered(Message):
   """
   A WAMP `REGISTERED` message.

   Format: `[REGISTERED, REGISTER.Request|id, Registration|id]`
   """

   MESSAGE_TYPE = 65
   """
   The WAMP message code for this type of message.
   """

   FIELDS = (('request', SHAPE_ID, True),
             ('registration', SHAPE_ID, True))


   def __init__(self, request, registration):
      """
      Message constructor.

      :param request: The request ID of the original `REGISTER` request.
      :type request: int
      :param registration: The registration ID for the registered procedure (or procedure pattern).
      :type registration: int
      """
      Message.__init__(self, request = request, registration = registration)



@implementer(IMessage)
class Unregister(Message):
   """
   A WAMP `UNREGISTER` message.

   Format: `[UNREGISTER, Request|id, REGISTERED.Registration|id]`
   """

   MESSAGE_TYPE = 66
   """
   The WAMP message code for this type of message.
   """

   FIELDS = (('request', SHAPE_ID, True),
             ('registration', SHAPE_ID, True))


   def __init__(self, request, registration):
      """
      Message constructor.

      :param request: The WAMP request ID of this request.
      :type request: int
      :param registration: The registration ID for the registration to unregister.
      :type registration: int
      """
      Message.__init__(self, request = request, registration = registration)



@implementer(IMessage)
class Unregistered(Message):
   """
   A WAMP `UNREGISTERED` message.

   Format: `[UNREGISTERED, UNREGISTER.Request|id]`
   """

   MESSAGE_TYPE = 67
   """
   The WAMP message code for this type of message.
   """

   FIELDS = (('request', SHAPE_ID, True),)


   def __init__(self, request):
      Message.__init__(self, request = request)



@implementer(IMessage)
class Invocation(Message):
   """
   A WAMP `INVOCATION` message.

   Formats:
     * `[INVOCATION, Request|id, REGISTERED.Registration|id, Details|dict]`
     * `[INVOCATION, Request|id, REGISTERED.Registration|id, Details|dict, CALL.Arguments|list]`
     * `[INVOCATION, Request|id, REGISTERED.Registration|id, Details|dict, CALL.Arguments|list, CALL.ArgumentsKw|dict]`
   """

   MESSAGE_TYPE = 68
   """
   The WAMP message code for this type of message.
   """

   FIELDS = (('request', SHAPE_ID, True),
             ('registration', SHAPE_ID, True),
             ('details', SHAPE_DICT, True),
             ('args', SHAPE_LIST, False),
             ('kwargs', SHAPE_DICT, False))


   def __init__(self, request, registration, details, args = None, kwargs = None):
      """
      Message constructor.

      :param request: The WAMP request ID of this request.
      :type request: int
      :param registration: The registration ID of the endpoint to be invoked.
      :type registration: int
      :param details: Invocation details, eg `caller` or `timeout`.
      :type details: dict
      :param args: Positional values for application-defined call arguments.
      :type args: list
      :param kwargs: Keyword values for application-defined call arguments.
      :type kwargs: dict
      """
      Message.__init__(self,
                       request = request,
                       registration = registration,
                       details = details,
                       args = args,
                       kwargs = kwargs)



@implementer(IMessage)
class Interrupt(Message):
   """
   A WAMP `INTERRUPT` message (advanced profile).

   Format: `[INTERRUPT, INVOCATION.Request|id, Options|dict]`
   """

   MESSAGE_TYPE = 69
   """
   The WAMP message code for this type of message.
   """

   FIELDS = (('request', SHAPE_ID, True),
             ('options', SHAPE_DICT, True))

   ADVANCED = True

   ABORT = 'abort'
   KILL = 'kill'


   def __init__(self, request, options):
      """
      Message constructor.

      :param request: The WAMP request ID of the original `INVOCATION` to interrupt.
      :type request: int
      :param options: Interrupt options, eg `mode` (one of `abort` or `kill`).
      :type options: dict
      """
      Message.__init__(self, request = request, options = options)



@implementer(IMessage)
class Yield(Message):
   """
   A WAMP `YIELD` message.

   Formats:
     * `[YIELD, INVOCATION.Request|id, Options|dict]`
     * `[YIELD, INVOCATION.Request|id, Options|dict, Arguments|list]`
     * `[YIELD, INVOCATION.Request|id, Options|dict, Arguments|list, ArgumentsKw|dict]`
   """

   MESSAGE_TYPE = 70
   """
   The WAMP message code for this type of message.
   """

   FIELDS = (('request', SHAPE_ID, True),
             ('options', SHAPE_DICT, True),
             ('args', SHAPE_LIST, False),
             ('kwargs', SHAPE_DICT, False))


   def __init__(self, request, options, args = None, kwargs = None):
      """
      Message constructor.

      :param request: The WAMP request ID of the original invocation.
      :type request: int
      :param options: Yield options, eg `progress`.
      :type options: dict
      :param args: Positional values for application-defined invocation result.
      :type args: list
      :param kwargs: Keyword values for application-defined invocation result.
      :type kwargs: dict
      """
      Message.__init__(self, request = request, options = options, args = args, kwargs = kwargs)



MESSAGE_CLASSES = (Hello,
                   Welcome,
                   Abort,
                   Challenge,
                   Authenticate,
                   Goodbye,
                   Error,
                   Publish,
                   Published,
                   Subscribe,
                   Subscribed,
                   Unsubscribe,
                   Unsubscribed,
                   Event,
                   Call,
                   Cancel,
                   Result,
                   Register,
                   Registered,
                   Unregister,
                   Unregistered,
                   Invocation,
                   Interrupt,
                   Yield)
"""
All message kinds modelled, basic and advanced profile.
"""

_MESSAGE_TYPE_TO_CLASS = dict([(klass.MESSAGE_TYPE, klass) for klass in MESSAGE_CLASSES])

assert(len(_MESSAGE_TYPE_TO_CLASS) == len(MESSAGE_CLASSES))



def code_for(kind):
   """
   Get the WAMP message type code for a message kind.

   :param kind: A message class (eg `Hello`) or message instance.
   :type kind: class or obj

   :returns int -- The message type code.
   """
   return kind.MESSAGE_TYPE



def kind_for(code):
   """
   Get the message kind for a WAMP message type code.

   :param code: The message type code.
   :type code: int

   :returns class -- The message class, or `None` for codes not modelled here.
   """
   if not _is_int(code):
      return None
   return _MESSAGE_TYPE_TO_CLASS.get(code)



def field_schema(kind):
   """
   Get the ordered slot schema of a message kind: a tuple of
   `(name, shape, required)` for every slot after the type code.
   """
   return kind.FIELDS
