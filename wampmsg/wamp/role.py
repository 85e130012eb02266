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

__all__ = ['Role',
           'ROLES',
           'CLIENT_ROLES',
           'ROUTER_ROLES']



class Role:
   """
   WAMP peer roles, as announced in the `roles` details of `HELLO` and `WELCOME`.
   """

   PUBLISHER = 'publisher'
   SUBSCRIBER = 'subscriber'
   CALLER = 'caller'
   CALLEE = 'callee'

   BROKER = 'broker'
   """
   Router role routing events from publishers to subscribers.
   """

   DEALER = 'dealer'
   """
   Router role routing calls between callers and callees.
   """


CLIENT_ROLES = (Role.PUBLISHER, Role.SUBSCRIBER, Role.CALLER, Role.CALLEE)

ROUTER_ROLES = (Role.BROKER, Role.DEALER)

ROLES = CLIENT_ROLES + ROUTER_ROLES
