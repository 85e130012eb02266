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

__all__ = ['Permission',
           'MESSAGE_DIRECTIONS',
           'get_message_direction']


from collections import namedtuple

from wampmsg.wamp import message
from wampmsg.wamp.role import Role, CLIENT_ROLES, ROUTER_ROLES



Permission = namedtuple('Permission', ['may_send', 'may_receive'])
Permission.__doc__ = """
Whether a peer in some role may send and/or receive some kind of message.
"""

_DENIED = Permission(may_send = False, may_receive = False)


_ALL_ROLES = CLIENT_ROLES + ROUTER_ROLES


## message type code -> (roles that send, roles that receive), following
## the role applicability tables of the WAMP specification
##
MESSAGE_DIRECTIONS = {
   ## session lifecycle
   message.Hello.MESSAGE_TYPE: (CLIENT_ROLES, ROUTER_ROLES),
   message.Welcome.MESSAGE_TYPE: (ROUTER_ROLES, CLIENT_ROLES),
   message.Abort.MESSAGE_TYPE: (ROUTER_ROLES, CLIENT_ROLES),
   message.Challenge.MESSAGE_TYPE: (ROUTER_ROLES, CLIENT_ROLES),
   message.Authenticate.MESSAGE_TYPE: (CLIENT_ROLES, ROUTER_ROLES),
   message.Goodbye.MESSAGE_TYPE: (_ALL_ROLES, _ALL_ROLES),
   message.Error.MESSAGE_TYPE: ((Role.CALLEE, Role.BROKER, Role.DEALER),
                                (Role.PUBLISHER, Role.SUBSCRIBER, Role.CALLER, Role.CALLEE, Role.DEALER)),

   ## publish & subscribe
   message.Publish.MESSAGE_TYPE: ((Role.PUBLISHER,), (Role.BROKER,)),
   message.Published.MESSAGE_TYPE: ((Role.BROKER,), (Role.PUBLISHER,)),
   message.Subscribe.MESSAGE_TYPE: ((Role.SUBSCRIBER,), (Role.BROKER,)),
   message.Subscribed.MESSAGE_TYPE: ((Role.BROKER,), (Role.SUBSCRIBER,)),
   message.Unsubscribe.MESSAGE_TYPE: ((Role.SUBSCRIBER,), (Role.BROKER,)),
   message.Unsubscribed.MESSAGE_TYPE: ((Role.BROKER,), (Role.SUBSCRIBER,)),
   message.Event.MESSAGE_TYPE: ((Role.BROKER,), (Role.SUBSCRIBER,)),

   ## remote procedure calls
   message.Call.MESSAGE_TYPE: ((Role.CALLER,), (Role.DEALER,)),
   message.Cancel.MESSAGE_TYPE: ((Role.CALLER,), (Role.DEALER,)),
   message.Result.MESSAGE_TYPE: ((Role.DEALER,), (Role.CALLER,)),
   message.Register.MESSAGE_TYPE: ((Role.CALLEE,), (Role.DEALER,)),
   message.Registered.MESSAGE_TYPE: ((Role.DEALER,), (Role.CALLEE,)),
   message.Unregister.MESSAGE_TYPE: ((Role.CALLEE,), (Role.DEALER,)),
   message.Unregistered.MESSAGE_TYPE: ((Role.DEALER,), (Role.CALLEE,)),
   message.Invocation.MESSAGE_TYPE: ((Role.DEALER,), (Role.CALLEE,)),
   message.Interrupt.MESSAGE_TYPE: ((Role.DEALER,), (Role.CALLEE,)),
   message.Yield.MESSAGE_TYPE: ((Role.CALLEE,), (Role.DEALER,)),
}

assert(set(MESSAGE_DIRECTIONS) == set([klass.MESSAGE_TYPE for klass in message.MESSAGE_CLASSES]))



def get_message_direction(kind, role):
   """
   Check whether a peer in the given role may send and/or receive
   messages of the given kind.

   This never fails: any combination not explicitly allowed by WAMP,
   including unknown kinds or roles, is denied.

   :param kind: A message class (eg `Publish`) or message instance.
   :type kind: class or obj
   :param role: A WAMP role name (eg `Role.PUBLISHER`).
   :type role: str

   :returns obj -- A :class:`Permission`.
   """
   code = getattr(kind, 'MESSAGE_TYPE', None)
   if message.kind_for(code) is None:
      return _DENIED

   senders, receivers = MESSAGE_DIRECTIONS[code]

   return Permission(may_send = role in senders,
                     may_receive = role in receivers)
